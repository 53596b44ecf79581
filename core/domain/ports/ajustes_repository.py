from abc import ABC, abstractmethod


class AjustesRepository(ABC):
    @abstractmethod
    def load(self) -> dict[str, str]:
        raise NotImplementedError

    @abstractmethod
    def save(self, valores: dict[str, str | None]) -> None:
        """Guarda cada clave; un valor None borra la clave."""
        raise NotImplementedError
