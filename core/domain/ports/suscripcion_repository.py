from abc import ABC, abstractmethod

from core.domain.models.suscripcion import SuscripcionPush


class SuscripcionRepository(ABC):
    @abstractmethod
    def save(self, suscripcion: SuscripcionPush) -> None:
        """Upsert por endpoint."""
        raise NotImplementedError

    @abstractmethod
    def list_por_departamento(self, departamento: str) -> list[SuscripcionPush]:
        raise NotImplementedError

    @abstractmethod
    def eliminar(self, endpoint: str) -> None:
        raise NotImplementedError
