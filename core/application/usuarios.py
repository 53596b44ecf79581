import logging
from dataclasses import dataclass

from core.domain.errors import (
    DepartamentoInvalidoError,
    UsuarioExistenteError,
    UsuarioNoEncontradoError,
)
from core.domain.models.departamento import Departamento, es_departamento_valido
from core.domain.models.usuario import ROL_ADMIN, Rol, Usuario
from core.domain.ports.seguridad import PasswordHasher
from core.domain.ports.usuario_repository import UsuarioRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CrearUsuarioCommand:
    username: str
    password: str
    rol: str
    departamento: str
    telefono: str | None = None


@dataclass(slots=True)
class CambiarPasswordCommand:
    username: str
    nueva_password: str


class CrearUsuarioUseCase:
    def __init__(self, usuarios: UsuarioRepository, hasher: PasswordHasher) -> None:
        self._usuarios = usuarios
        self._hasher = hasher

    def execute(self, cmd: CrearUsuarioCommand) -> Usuario:
        if not es_departamento_valido(cmd.departamento):
            raise DepartamentoInvalidoError(cmd.departamento)
        if self._usuarios.get(cmd.username) is not None:
            raise UsuarioExistenteError(cmd.username)

        usuario = self._usuarios.save(
            Usuario(
                username=cmd.username,
                password_hash=self._hasher.hash(cmd.password),
                rol=Rol(cmd.rol).value,
                departamento=cmd.departamento,
                telefono=cmd.telefono,
            )
        )
        logger.info(f"👤 Usuario '{usuario.username}' creado ({usuario.rol})")
        return usuario


class CambiarPasswordUseCase:
    def __init__(self, usuarios: UsuarioRepository, hasher: PasswordHasher) -> None:
        self._usuarios = usuarios
        self._hasher = hasher

    def execute(self, cmd: CambiarPasswordCommand) -> None:
        usuario = self._usuarios.get(cmd.username)
        if usuario is None:
            raise UsuarioNoEncontradoError(cmd.username)
        usuario.password_hash = self._hasher.hash(cmd.nueva_password)
        self._usuarios.save(usuario)
        logger.info(f"🔑 Password actualizado para '{cmd.username}'")


def sembrar_admin(
    usuarios: UsuarioRepository, hasher: PasswordHasher, password: str
) -> bool:
    """Crea el usuario `sistemas` si no existe. Devuelve True si lo creó."""
    if usuarios.get(ROL_ADMIN) is not None:
        return False
    usuarios.save(
        Usuario(
            username=ROL_ADMIN,
            password_hash=hasher.hash(password),
            rol=ROL_ADMIN,
            departamento=Departamento.SISTEMAS.value,
        )
    )
    logger.info("👤 Usuario sistemas creado")
    return True
