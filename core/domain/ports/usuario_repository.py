from abc import ABC, abstractmethod

from core.domain.models.usuario import Usuario


class UsuarioRepository(ABC):
    @abstractmethod
    def get(self, username: str) -> Usuario | None:
        raise NotImplementedError

    @abstractmethod
    def save(self, usuario: Usuario) -> Usuario:
        raise NotImplementedError

    @abstractmethod
    def telefonos_por_departamento(self, departamento: str) -> list[str]:
        raise NotImplementedError
