from abc import ABC, abstractmethod
from typing import Any

from core.domain.models.usuario import Usuario


class PasswordHasher(ABC):
    @abstractmethod
    def hash(self, password: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def verify(self, password_hash: str, password: str) -> bool:
        raise NotImplementedError


class TokenService(ABC):
    @abstractmethod
    def emitir(self, usuario: Usuario) -> str:
        raise NotImplementedError

    @abstractmethod
    def verificar(self, token: str) -> dict[str, Any] | None:
        """Claims del token, o None si es inválido o expiró."""
        raise NotImplementedError
