"""Mapa nombre de operacion -> handler, y el armado por defecto del runner."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

import requests

from .config import Config
from .errors import ConfigError, DispatchError
from .services.base import RequestHandler
from .services.client_credentials import TokenStore
from .services.handlers import GetHandler, PostHandler
from .services.ping_auth import PingTokenIssuer
from .services.request_executor import Outcome, RequestExecutor
from .services.retry_controller import RetryController

logger = logging.getLogger(__name__)


class ApiDispatcher:
    def __init__(self, registry: Mapping[str, RequestHandler]):
        self._registry = MappingProxyType(dict(registry))

    @property
    def registry(self) -> Mapping[str, RequestHandler]:
        return self._registry

    def names(self) -> List[str]:
        return list(self._registry)

    def dispatch(self, name: str) -> Outcome:
        handler = self._registry.get(name)
        if handler is None:
            logger.warning("Invalid or unknown API name: %s", name)
            raise DispatchError(name)
        return handler.execute()


def build_registry(controller: RetryController, **handler_kwargs) -> Dict[str, RequestHandler]:
    handlers = [GetHandler(controller, **handler_kwargs), PostHandler(controller, **handler_kwargs)]
    return {h.name: h for h in handlers}


def build_dispatcher(session: Optional[requests.Session] = None) -> ApiDispatcher:
    """Arma store + issuer + executor + controller a partir de Config."""
    if not Config.API_HOST:
        raise ConfigError("API_HOST no configurado")
    session = session or requests.Session()
    controller = RetryController(
        store=TokenStore(),
        issuer=PingTokenIssuer(session=session),
        executor=RequestExecutor(session=session),
    )
    return ApiDispatcher(build_registry(controller))
