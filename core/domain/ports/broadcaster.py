from abc import ABC, abstractmethod

from core.domain.models.eventos import EventoTarea


class Broadcaster(ABC):
    @abstractmethod
    def broadcast_all(self, evento: EventoTarea) -> None:
        raise NotImplementedError

    @abstractmethod
    def broadcast_to_department(self, departamento: str, evento: EventoTarea) -> None:
        raise NotImplementedError
