"""Fakes: reloj, sesion HTTP e issuer."""

from __future__ import annotations

import requests

from pingrunner.src.errors import AuthError
from pingrunner.src.services.client_credentials import ClientCredentials


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def json(self):
        if self._text is not None:
            raise ValueError("not json")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    """Stand-in for requests.Session: returns queued responses, records calls."""

    def __init__(self, responses=None, error: Exception | None = None):
        self.responses = list(responses or [])
        self.error = error
        self.calls: list[dict] = []

    def _next(self, **call):
        self.calls.append(call)
        if self.error is not None:
            raise self.error
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

    def request(self, method, url, headers=None, data=None, timeout=None):
        return self._next(method=method, url=url, headers=headers, data=data, timeout=timeout)

    def post(self, url, data=None, timeout=None):
        return self._next(method="POST", url=url, data=data, timeout=timeout)


class FakeIssuer(ClientCredentials):
    """Issuer that hands out tokens with a fixed TTL, or fails."""

    def __init__(self, clock: FakeClock, ttl: int = 3600, fail: bool = False, ttls=None):
        super().__init__(client_secret="secret", token_url="https://idp.test/as/token.oauth2", clock=clock)
        self.ttl = ttl
        self.fail = fail
        # TTL per call; once exhausted, falls back to `ttl`
        self.ttls = list(ttls or [])
        self.calls = 0

    def _fetch_token(self):
        self.calls += 1
        if self.fail:
            raise AuthError("identity provider unreachable")
        ttl = self.ttls.pop(0) if self.ttls else self.ttl
        return f"T{self.calls}", ttl


class ClockAdvancingSession(FakeSession):
    """FakeSession that moves the clock forward while a request is in flight."""

    def __init__(self, clock: FakeClock, seconds: float, responses=None):
        super().__init__(responses)
        self.clock = clock
        self.seconds = seconds

    def request(self, method, url, headers=None, data=None, timeout=None):
        self.clock.advance(self.seconds)
        return super().request(method, url, headers=headers, data=data, timeout=timeout)


