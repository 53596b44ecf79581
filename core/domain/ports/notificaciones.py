from abc import ABC, abstractmethod
from typing import Any


class PushProvider(ABC):
    @abstractmethod
    def enviar(self, suscripcion: dict[str, Any], payload: str) -> None:
        """
        Entrega `payload` a una suscripción.

        Lanza SuscripcionExpiradaError si el proveedor reporta que el
        endpoint ya no existe; cualquier otro fallo como EnvioNotificacionError.
        """
        raise NotImplementedError


class WhatsAppProvider(ABC):
    @abstractmethod
    def enviar(self, telefono: str, texto: str) -> None:
        raise NotImplementedError


class Notificador(ABC):
    """Punto de entrada de los casos de uso para avisar a un departamento."""

    @abstractmethod
    def notify(
        self,
        departamento: str,
        titulo: str,
        mensaje: str,
        tarea_id: int | None = None,
    ) -> None:
        raise NotImplementedError


class Despachador(ABC):
    """
    Entrega en dos pasos para quien difiere el envío a otro hilo: la
    presencia se decide al momento del aviso y la entrega no la vuelve a mirar.
    """

    @abstractmethod
    def esta_online(self, departamento: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def entregar(
        self,
        departamento: str,
        titulo: str,
        mensaje: str,
        tarea_id: int | None = None,
    ) -> Any:
        raise NotImplementedError
