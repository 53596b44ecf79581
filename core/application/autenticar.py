import logging
from dataclasses import dataclass

from core.domain.errors import CredencialesInvalidasError
from core.domain.models.usuario import Usuario
from core.domain.ports.seguridad import PasswordHasher, TokenService
from core.domain.ports.usuario_repository import UsuarioRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoginCommand:
    username: str
    password: str


@dataclass(slots=True)
class Sesion:
    token: str
    usuario: Usuario


class LoginUseCase:
    def __init__(
        self,
        usuarios: UsuarioRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._usuarios = usuarios
        self._hasher = hasher
        self._tokens = tokens

    def execute(self, cmd: LoginCommand) -> Sesion:
        usuario = self._usuarios.get(cmd.username)
        if usuario is None or not self._hasher.verify(usuario.password_hash, cmd.password):
            logger.warning(f"🔒 Login fallido para '{cmd.username}'")
            raise CredencialesInvalidasError("Usuario o contraseña incorrectos")
        return Sesion(token=self._tokens.emitir(usuario), usuario=usuario)
