"""Autenticacion PingFederate (Client Credentials).

Uso:
    issuer = PingTokenIssuer()
    token = issuer.issue()  # Token(value, expires_at)
"""

from __future__ import annotations

import time
from typing import Optional

import requests

from ..config import Config
from ..errors import AuthError
from .client_credentials import ClientCredentials, Clock


class PingTokenIssuer(ClientCredentials):
    transaction = "PingAuth"

    def __init__(
        self,
        client_secret: Optional[str] = None,
        token_url: Optional[str] = None,
        scope: Optional[str] = None,
        access_token_manager_id: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        clock: Clock = time.time,
    ):
        client_secret = client_secret or Config.PING_CLIENT_SECRET
        if token_url is None and Config.PING_BASE_URL:
            token_url = Config.PING_BASE_URL.rstrip("/") + Config.PING_TOKEN_PATH
        super().__init__(
            client_secret=client_secret,
            token_url=token_url or "",
            scope=scope if scope is not None else Config.PING_SCOPE,
            clock=clock,
        )
        self.access_token_manager_id = access_token_manager_id or Config.PING_ACCESS_TOKEN_MANAGER_ID
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else Config.HTTP_TIMEOUT

    def _fetch_token(self):
        payload = {
            "grant_type": "client_credentials",
            "access_token_manager_id": self.access_token_manager_id,
            "client_secret": self.client_secret,
            "scope": self.scope or "",
        }
        try:
            resp = self.session.post(self.token_url, data=payload, timeout=self.timeout)
            resp.raise_for_status()
            if not 200 <= resp.status_code < 300:
                raise AuthError(f"Respuesta de token con status {resp.status_code}")
            data = resp.json() or {}
        except requests.RequestException as exc:
            raise AuthError(f"No se pudo obtener token de PingFederate: {exc}") from exc
        except ValueError as exc:
            raise AuthError("Respuesta de token no es JSON valido") from exc
        if not isinstance(data, dict):
            raise AuthError("Respuesta de token no es un objeto JSON")
        access_token = data.get("access_token")
        if not access_token:
            raise AuthError("Respuesta de token sin access_token")
        try:
            expires_in = int(data["expires_in"])
        except (KeyError, TypeError, ValueError) as exc:
            raise AuthError("Respuesta de token sin expires_in valido") from exc
        return access_token, expires_in
