from dataclasses import dataclass
from enum import Enum


class Rol(str, Enum):
    SISTEMAS = "sistemas"
    GERENCIA = "gerencia"
    STAFF = "staff"


# Roles que ven (y reciben eventos de) todos los departamentos.
ROLES_GLOBALES: frozenset[str] = frozenset({Rol.SISTEMAS.value, Rol.GERENCIA.value})
ROL_ADMIN = Rol.SISTEMAS.value


@dataclass(slots=True)
class Usuario:
    username: str
    password_hash: str
    rol: str
    departamento: str
    id: int | None = None
    telefono: str | None = None

    @property
    def es_admin(self) -> bool:
        return self.rol == ROL_ADMIN

    @property
    def ve_todos_los_departamentos(self) -> bool:
        return self.rol in ROLES_GLOBALES
