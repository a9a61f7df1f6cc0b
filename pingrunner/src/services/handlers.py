"""Handlers GET/POST contra `<host><endpoint>` del API destino."""

from __future__ import annotations

import time
from typing import Callable, Optional

from ..config import Config
from .base import RequestHandler
from .request_executor import Outcome
from .retry_controller import RetryController


class _HttpHandler(RequestHandler):
    method = "GET"

    def __init__(
        self,
        controller: RetryController,
        host: Optional[str] = None,
        endpoint: Optional[str] = None,
        think_time: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.controller = controller
        self.host = (host if host is not None else Config.API_HOST).rstrip("/")
        self.endpoint = endpoint if endpoint is not None else Config.API_ENDPOINT
        self.think_time = think_time if think_time is not None else Config.THINK_TIME
        self._sleep = sleep

    @property
    def url(self) -> str:
        return f"{self.host}{self.endpoint}"

    def body(self) -> Optional[bytes]:
        return None

    def execute(self) -> Outcome:
        outcome = self.controller.run(self.method, self.url, body=self.body(), operation=self.name)
        if self.think_time > 0:
            self._sleep(self.think_time)
        return outcome


class GetHandler(_HttpHandler):
    name = "GET_Request"
    method = "GET"


class PostHandler(_HttpHandler):
    name = "POST_Request"
    method = "POST"

    def __init__(self, controller: RetryController, body: Optional[str | bytes] = None, **kwargs):
        super().__init__(controller, **kwargs)
        raw = body if body is not None else Config.REQUEST_BODY
        self._body = raw.encode("utf-8") if isinstance(raw, str) else raw

    def body(self) -> Optional[bytes]:
        return self._body
