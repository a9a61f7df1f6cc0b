"""Ejecucion de una peticion HTTP ya armada y clasificacion del resultado.

No agrega autenticacion: los headers `Authorization` y `x-api-key` los pone
el RetryController antes de llamar a `execute`.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

import requests

from ..config import Config

logger = logging.getLogger(__name__)

PASS_STATUSES = (200, 204)


@dataclass(frozen=True)
class RequestSpec:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

    def __post_init__(self):
        method = self.method.upper()
        if method not in ("GET", "POST"):
            raise ValueError(f"Unsupported method: {self.method}")
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


@dataclass(frozen=True)
class Outcome:
    status_code: int
    passed: bool
    latency: float
    operation: str = ""
    error: Optional[str] = None

    def to_dict(self):
        return {
            "operation": self.operation,
            "status_code": self.status_code,
            "passed": self.passed,
            "latency_ms": round(self.latency * 1000.0, 2),
            "error": self.error,
        }


def classify(status_code: int) -> bool:
    """200 y 204 pasan; cualquier otro codigo es fallo."""
    return status_code in PASS_STATUSES


class RequestExecutor:
    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else Config.HTTP_TIMEOUT

    def execute(self, spec: RequestSpec, operation: str = "") -> Outcome:
        headers = dict(spec.headers)
        headers.setdefault("Content-Type", "application/json")
        started = time.perf_counter()
        try:
            resp = self.session.request(
                spec.method,
                spec.url,
                headers=headers,
                data=spec.body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            latency = time.perf_counter() - started
            logger.warning("Request %s %s failed: %s", spec.method, spec.url, exc)
            return Outcome(status_code=0, passed=False, latency=latency, operation=operation, error=str(exc))
        latency = time.perf_counter() - started

        status = resp.status_code
        passed = classify(status)
        logger.info("Return Code = %d", status)
        logger.info(
            "transaction %s %s (%.1f ms)",
            operation or spec.method,
            "PASS" if passed else "FAIL",
            latency * 1000.0,
        )
        return Outcome(status_code=status, passed=passed, latency=latency, operation=operation)
