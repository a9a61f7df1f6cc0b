"""Errores del runner; todos heredan de RuntimeError como el resto del proyecto."""

from __future__ import annotations


class PingRunnerError(RuntimeError):
    """Base para errores del runner."""


class AuthError(PingRunnerError):
    """No se pudo obtener (o no hay) un token valido; la llamada se aborta."""


class ConfigError(PingRunnerError):
    """Falta configuracion obligatoria (host, client secret, ...)."""


class DispatchError(PingRunnerError):
    """Nombre de operacion desconocido; no se ejecuta ningun handler."""

    def __init__(self, name: str):
        super().__init__(f"Invalid or unknown API name: {name}")
        self.name = name
