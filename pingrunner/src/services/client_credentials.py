"""Token vigente (TokenStore) separado de su emision (ClientCredentials).

El store solo guarda y valida; el issuer hace el intercambio y arma el Token.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..errors import AuthError, ConfigError

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True)
class Token:
    value: str
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at


class TokenStore:
    """Guarda el token vigente y su instante de expiracion (epoch).

    El token se reemplaza entero; nunca se modifica parcialmente.
    """

    def __init__(self, token: Optional[Token] = None, clock: Clock = time.time):
        self._token = token
        self._clock = clock

    def is_valid(self) -> bool:
        token = self._token
        return token is not None and token.is_valid(self._clock())

    def current(self) -> Token:
        if self._token is None:
            raise AuthError("No hay token en el store")
        return self._token

    def replace(self, token: Token) -> None:
        self._token = token


class ClientCredentials(ABC):
    """Emisor de tokens: mide la transaccion y construye el Token.

    Las subclases solo implementan `_fetch_token`, que hace el intercambio real.
    """

    transaction = "token"

    def __init__(self, client_secret: str, token_url: str, scope: Optional[str] = None, clock: Clock = time.time):
        if not client_secret:
            raise ConfigError("Client credentials require client_secret")
        if not token_url:
            raise ConfigError("Client credentials require token_url")
        self.client_secret = client_secret
        self.token_url = token_url
        self.scope = scope
        self._clock = clock

    def issue(self) -> Token:
        now = self._clock()
        started = time.perf_counter()
        try:
            value, expires_in = self._fetch_token()
        except AuthError:
            self._log_transaction(False, started)
            raise
        if not value:
            self._log_transaction(False, started)
            raise AuthError("Client credentials response did not return an access token")
        self._log_transaction(True, started)
        return Token(value=value, expires_at=now + expires_in)

    def _log_transaction(self, passed: bool, started: float) -> None:
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        logger.info(
            "transaction %s %s (%.1f ms)",
            self.transaction,
            "PASS" if passed else "FAIL",
            elapsed_ms,
        )

    @abstractmethod
    def _fetch_token(self) -> Tuple[Optional[str], int]:
        """Return a tuple (access_token, expires_in); raise AuthError on failure."""
