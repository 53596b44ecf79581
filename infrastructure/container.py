import logging
import os

from core.application.ajustes import AjustesService
from core.application.autenticar import LoginUseCase
from core.application.comentar_tarea import ComentarTareaUseCase
from core.application.crear_tarea import CrearTareaUseCase
from core.application.editar_tarea import EditarTareaUseCase
from core.application.listar_tareas import ListarTareasUseCase
from core.application.notificar_departamento import (
    CANAL_PUSH,
    CANAL_WHATSAPP,
    NotificarDepartamentoUseCase,
)
from core.application.suscribir import SuscribirUseCase
from core.application.usuarios import (
    CambiarPasswordUseCase,
    CrearUsuarioUseCase,
    sembrar_admin,
)
from core.domain.ports.ajustes_repository import AjustesRepository
from core.domain.ports.notificaciones import PushProvider, WhatsAppProvider
from core.domain.ports.seguridad import PasswordHasher, TokenService
from core.domain.ports.suscripcion_repository import SuscripcionRepository
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.ports.usuario_repository import UsuarioRepository
from infrastructure.notificaciones.pool import PoolNotificaciones
from infrastructure.realtime.connection_manager import ConnectionManager
from infrastructure.realtime.presencia import InMemoryPresencia
from infrastructure.seguridad.jwt_tokens import JwtTokenService
from infrastructure.seguridad.passwords import WerkzeugPasswordHasher

logger = logging.getLogger(__name__)

_presencia: InMemoryPresencia | None = None
_connection_manager: ConnectionManager | None = None
_notificador: PoolNotificaciones | None = None


def _orm() -> str:
    return os.getenv("ORM", "peewee").lower()


def get_tarea_repository() -> TareaRepository:
    if _orm() == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.tarea_repository import (
            SqlAlchemyTareaRepository,
        )

        return SqlAlchemyTareaRepository()
    # Default to Peewee
    from infrastructure.peewee.repository.tarea_repository import PeeweeTareaRepository

    return PeeweeTareaRepository()


def get_suscripcion_repository() -> SuscripcionRepository:
    if _orm() == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.suscripcion_repository import (
            SqlAlchemySuscripcionRepository,
        )

        return SqlAlchemySuscripcionRepository()
    from infrastructure.peewee.repository.suscripcion_repository import (
        PeeweeSuscripcionRepository,
    )

    return PeeweeSuscripcionRepository()


def get_usuario_repository() -> UsuarioRepository:
    if _orm() == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.usuario_repository import (
            SqlAlchemyUsuarioRepository,
        )

        return SqlAlchemyUsuarioRepository()
    from infrastructure.peewee.repository.usuario_repository import (
        PeeweeUsuarioRepository,
    )

    return PeeweeUsuarioRepository()


def get_ajustes_repository() -> AjustesRepository:
    if _orm() == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.ajustes_repository import (
            SqlAlchemyAjustesRepository,
        )

        return SqlAlchemyAjustesRepository()
    from infrastructure.peewee.repository.ajustes_repository import (
        PeeweeAjustesRepository,
    )

    return PeeweeAjustesRepository()


def get_presencia() -> InMemoryPresencia:
    global _presencia
    if _presencia is None:
        _presencia = InMemoryPresencia()
    return _presencia


def get_connection_manager() -> ConnectionManager:
    global _connection_manager
    if _connection_manager is None:
        _connection_manager = ConnectionManager()
    return _connection_manager


def get_password_hasher() -> PasswordHasher:
    return WerkzeugPasswordHasher()


def get_token_service() -> TokenService:
    return JwtTokenService(
        secret=os.getenv("JWT_SECRET", "cambiar-en-produccion"),
        expire_minutes=int(os.getenv("JWT_EXPIRE_MINUTES", "720")),
    )


def canales_habilitados() -> set[str]:
    canales = os.getenv("NOTIFY_CHANNELS", CANAL_PUSH)
    return {c.strip().lower() for c in canales.split(",") if c.strip()}


def get_push_provider() -> PushProvider | None:
    private_key = os.getenv("VAPID_PRIVATE_KEY")
    if CANAL_PUSH not in canales_habilitados():
        return None
    if not private_key:
        logger.warning("VAPID_PRIVATE_KEY no configurada, push deshabilitado")
        return None

    from infrastructure.notificaciones.webpush_provider import WebPushProvider

    return WebPushProvider(
        vapid_private_key=private_key,
        claims_email=os.getenv("VAPID_CLAIMS_EMAIL", "admin@example.com"),
    )


def get_whatsapp_provider() -> WhatsAppProvider | None:
    if CANAL_WHATSAPP not in canales_habilitados():
        return None
    token = os.getenv("WHATSAPP_TOKEN")
    phone_number_id = os.getenv("WHATSAPP_PHONE_NUMBER_ID")
    if not token or not phone_number_id:
        logger.warning("WhatsApp sin credenciales, canal deshabilitado")
        return None

    from infrastructure.notificaciones.whatsapp_provider import WhatsAppCloudProvider

    return WhatsAppCloudProvider(
        api_url=os.getenv("WHATSAPP_API_URL", "https://graph.facebook.com/v19.0"),
        phone_number_id=phone_number_id,
        token=token,
    )


def get_notificar_departamento_use_case() -> NotificarDepartamentoUseCase:
    return NotificarDepartamentoUseCase(
        presencia=get_presencia(),
        suscripciones=get_suscripcion_repository(),
        usuarios=get_usuario_repository(),
        push=get_push_provider(),
        whatsapp=get_whatsapp_provider(),
    )


def get_notificador() -> PoolNotificaciones:
    global _notificador
    if _notificador is None:
        _notificador = PoolNotificaciones(
            despachador=get_notificar_departamento_use_case(),
            max_workers=int(os.getenv("NOTIFY_MAX_WORKERS", "4")),
            max_pendientes=int(os.getenv("NOTIFY_MAX_PENDING", "100")),
        )
    return _notificador


def get_crear_tarea_use_case() -> CrearTareaUseCase:
    return CrearTareaUseCase(
        repository=get_tarea_repository(),
        broadcaster=get_connection_manager(),
        notificador=get_notificador(),
    )


def get_editar_tarea_use_case() -> EditarTareaUseCase:
    return EditarTareaUseCase(
        repository=get_tarea_repository(),
        broadcaster=get_connection_manager(),
        notificador=get_notificador(),
    )


def get_comentar_tarea_use_case() -> ComentarTareaUseCase:
    return ComentarTareaUseCase(
        repository=get_tarea_repository(),
        broadcaster=get_connection_manager(),
        notificador=get_notificador(),
    )


def get_listar_tareas_use_case() -> ListarTareasUseCase:
    return ListarTareasUseCase(repository=get_tarea_repository())


def get_login_use_case() -> LoginUseCase:
    return LoginUseCase(
        usuarios=get_usuario_repository(),
        hasher=get_password_hasher(),
        tokens=get_token_service(),
    )


def get_crear_usuario_use_case() -> CrearUsuarioUseCase:
    return CrearUsuarioUseCase(usuarios=get_usuario_repository(), hasher=get_password_hasher())


def get_cambiar_password_use_case() -> CambiarPasswordUseCase:
    return CambiarPasswordUseCase(usuarios=get_usuario_repository(), hasher=get_password_hasher())


def get_suscribir_use_case() -> SuscribirUseCase:
    return SuscribirUseCase(repository=get_suscripcion_repository())


def get_ajustes_service() -> AjustesService:
    return AjustesService(repository=get_ajustes_repository())


def startup() -> None:
    password = os.getenv("SEED_SISTEMAS_PASSWORD")
    if password:
        sembrar_admin(get_usuario_repository(), get_password_hasher(), password)


def shutdown() -> None:
    global _notificador
    if _notificador is not None:
        _notificador.shutdown(wait=True)
        _notificador = None
