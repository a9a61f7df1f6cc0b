import os
from dotenv import load_dotenv


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    return float(raw)


class Config:
    load_dotenv()

    DEBUG = os.getenv("DEBUG", "true").lower() == "true"

    # API destino: URL = API_HOST + API_ENDPOINT
    API_HOST = os.getenv("API_HOST", "")
    API_ENDPOINT = os.getenv("API_ENDPOINT", "")
    API_KEY = os.getenv("API_KEY", "")
    # Body JSON para POST_Request
    REQUEST_BODY = os.getenv("REQUEST_BODY", "{}")

    # PingFederate (Client Credentials)
    PING_BASE_URL = os.getenv("PING_BASE_URL", "")
    PING_TOKEN_PATH = os.getenv("PING_TOKEN_PATH", "/as/token.oauth2")
    PING_ACCESS_TOKEN_MANAGER_ID = os.getenv("PING_ACCESS_TOKEN_MANAGER_ID", "PingFederateJWT")
    PING_CLIENT_SECRET = os.getenv("PING_CLIENT_SECRET")
    PING_SCOPE = os.getenv("PING_SCOPE", "")

    # Ejecucion
    HTTP_TIMEOUT = _float("HTTP_TIMEOUT", 20.0)
    MAX_TOKEN_ATTEMPTS = int(os.getenv("MAX_TOKEN_ATTEMPTS", "3"))
    THINK_TIME = _float("THINK_TIME", 0.0)
    DEFAULT_OPERATION = os.getenv("DEFAULT_OPERATION", "GET_Request")
