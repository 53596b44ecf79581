from abc import ABC, abstractmethod


class PresenciaService(ABC):
    @abstractmethod
    def mark_online(self, departamento: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def mark_offline(self, departamento: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def is_online(self, departamento: str) -> bool:
        raise NotImplementedError
