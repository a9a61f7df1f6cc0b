from __future__ import annotations

from abc import ABC, abstractmethod

from .request_executor import Outcome


class RequestHandler(ABC):
    """Clase base para las operaciones registradas en el dispatcher.

    Cada handler arma su peticion y la delega al RetryController.
    """

    name: str = "handler"

    @abstractmethod
    def execute(self) -> Outcome:
        """Ejecuta la operacion una vez y devuelve su Outcome."""
        raise NotImplementedError
