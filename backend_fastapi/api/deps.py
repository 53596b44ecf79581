from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.application.ajustes import AjustesService
from core.application.autenticar import LoginUseCase
from core.application.comentar_tarea import ComentarTareaUseCase
from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import EditarTareaUseCase
from core.application.listar_tareas import ListarTareasUseCase
from core.application.suscribir import SuscribirUseCase
from core.application.usuarios import CambiarPasswordUseCase, CrearUsuarioUseCase
from core.domain.models.usuario import Usuario
from core.domain.ports.presencia import PresenciaService
from core.domain.ports.seguridad import TokenService
from core.domain.ports.usuario_repository import UsuarioRepository
from infrastructure import container
from infrastructure.realtime.connection_manager import ConnectionManager

_bearer = HTTPBearer(auto_error=False)


def crear_tarea_use_case() -> CrearTareaUseCase:
    return container.get_crear_tarea_use_case()


def editar_tarea_use_case() -> EditarTareaUseCase:
    return container.get_editar_tarea_use_case()


def comentar_tarea_use_case() -> ComentarTareaUseCase:
    return container.get_comentar_tarea_use_case()


def listar_tareas_use_case() -> ListarTareasUseCase:
    return container.get_listar_tareas_use_case()


def login_use_case() -> LoginUseCase:
    return container.get_login_use_case()


def crear_usuario_use_case() -> CrearUsuarioUseCase:
    return container.get_crear_usuario_use_case()


def cambiar_password_use_case() -> CambiarPasswordUseCase:
    return container.get_cambiar_password_use_case()


def suscribir_use_case() -> SuscribirUseCase:
    return container.get_suscribir_use_case()


def ajustes_service() -> AjustesService:
    return container.get_ajustes_service()


def usuario_repository() -> UsuarioRepository:
    return container.get_usuario_repository()


def token_service() -> TokenService:
    return container.get_token_service()


def presencia() -> PresenciaService:
    return container.get_presencia()


def connection_manager() -> ConnectionManager:
    return container.get_connection_manager()


def usuario_actual(
    credenciales: HTTPAuthorizationCredentials | None = Depends(_bearer),
    tokens: TokenService = Depends(token_service),
    usuarios: UsuarioRepository = Depends(usuario_repository),
) -> Usuario:
    if credenciales is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Falta token")

    claims = tokens.verificar(credenciales.credentials)
    if claims is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token inválido")

    usuario = usuarios.get(claims["sub"])
    if usuario is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Usuario inexistente")
    return usuario


def usuario_admin(usuario: Usuario = Depends(usuario_actual)) -> Usuario:
    if not usuario.es_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Requiere rol sistemas")
    return usuario
