from abc import ABC, abstractmethod
from typing import List

from core.domain.models.tarea import Tarea


class TareaRepository(ABC):
    @abstractmethod
    def list(self) -> List[Tarea]:
        """Todas las tareas, la más reciente primero."""
        raise NotImplementedError

    @abstractmethod
    def list_por_departamento(self, departamento: str) -> List[Tarea]:
        raise NotImplementedError

    @abstractmethod
    def save(self, tarea: Tarea) -> Tarea:
        """Inserta o actualiza. En una inserción asigna `id` y `creado_en`."""
        raise NotImplementedError

    @abstractmethod
    def get(self, tarea_id: int) -> Tarea | None:
        raise NotImplementedError
