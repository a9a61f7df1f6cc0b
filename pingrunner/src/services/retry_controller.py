"""Garantiza un token vigente antes de cada llamada y luego ejecuta la peticion.

Maquina de dos estados: CheckingToken -> Executing. El token se revalida en
la siguiente llamada, nunca a mitad de una peticion.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from ..config import Config
from ..errors import AuthError
from .client_credentials import ClientCredentials, Token, TokenStore
from .request_executor import Outcome, RequestExecutor, RequestSpec

logger = logging.getLogger(__name__)


class RetryController:
    def __init__(
        self,
        store: TokenStore,
        issuer: ClientCredentials,
        executor: RequestExecutor,
        api_key: Optional[str] = None,
        max_token_attempts: Optional[int] = None,
    ):
        self.store = store
        self.issuer = issuer
        self.executor = executor
        self.api_key = api_key if api_key is not None else Config.API_KEY
        self.max_token_attempts = (
            max_token_attempts if max_token_attempts is not None else Config.MAX_TOKEN_ATTEMPTS
        )
        if self.max_token_attempts < 1:
            raise ValueError("max_token_attempts must be >= 1")
        self._lock = threading.Lock()

    def ensure_token(self) -> Token:
        """Estado CheckingToken: devuelve un token vigente o levanta AuthError."""
        with self._lock:
            attempts = 0
            while not self.store.is_valid():
                if attempts >= self.max_token_attempts:
                    raise AuthError(
                        f"Token still invalid after {attempts} refresh attempts"
                    )
                attempts += 1
                logger.info("Token expired or missing, refreshing (attempt %d)", attempts)
                self.store.replace(self.issuer.issue())
            return self.store.current()

    def run(self, method: str, url: str, body: Optional[bytes] = None, operation: str = "") -> Outcome:
        token = self.ensure_token()
        spec = RequestSpec(
            method=method,
            url=url,
            headers={
                "Authorization": f"Bearer {token.value}",
                "x-api-key": self.api_key,
                "Content-Type": "application/json",
            },
            body=body,
        )
        return self.executor.execute(spec, operation=operation)
