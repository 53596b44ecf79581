from typing import Any, List

from core.domain.errors import SuscripcionExpiradaError
from core.domain.models.eventos import EventoTarea
from core.domain.models.suscripcion import SuscripcionPush
from core.domain.models.tarea import Tarea
from core.domain.models.usuario import Usuario
from core.domain.ports.ajustes_repository import AjustesRepository
from core.domain.ports.broadcaster import Broadcaster
from core.domain.ports.notificaciones import (
    Despachador,
    Notificador,
    PushProvider,
    WhatsAppProvider,
)
from core.domain.ports.seguridad import PasswordHasher
from core.domain.ports.suscripcion_repository import SuscripcionRepository
from core.domain.ports.tarea_repository import TareaRepository
from core.domain.ports.usuario_repository import UsuarioRepository


class InMemoryTareaRepository(TareaRepository):
    def __init__(self) -> None:
        self._data: dict[int, Tarea] = {}
        self._next_id = 1
        self.saves = 0

    def list(self) -> List[Tarea]:
        return sorted(self._data.values(), key=lambda t: t.id, reverse=True)

    def list_por_departamento(self, departamento: str) -> List[Tarea]:
        return [t for t in self.list() if t.departamento == departamento]

    def save(self, tarea: Tarea) -> Tarea:
        self.saves += 1
        if tarea.id is None:
            tarea.id = self._next_id
            self._next_id += 1
        self._data[tarea.id] = tarea
        return tarea

    def get(self, tarea_id: int) -> Tarea | None:
        return self._data.get(tarea_id)


class InMemorySuscripcionRepository(SuscripcionRepository):
    def __init__(self) -> None:
        self._data: dict[str, SuscripcionPush] = {}

    def save(self, suscripcion: SuscripcionPush) -> None:
        self._data[suscripcion.endpoint] = suscripcion

    def list_por_departamento(self, departamento: str) -> list[SuscripcionPush]:
        return [s for s in self._data.values() if s.departamento == departamento]

    def eliminar(self, endpoint: str) -> None:
        self._data.pop(endpoint, None)

    def endpoints(self) -> set[str]:
        return set(self._data)


class InMemoryUsuarioRepository(UsuarioRepository):
    def __init__(self) -> None:
        self._data: dict[str, Usuario] = {}

    def get(self, username: str) -> Usuario | None:
        return self._data.get(username)

    def save(self, usuario: Usuario) -> Usuario:
        if usuario.id is None:
            usuario.id = len(self._data) + 1
        self._data[usuario.username] = usuario
        return usuario

    def telefonos_por_departamento(self, departamento: str) -> list[str]:
        return [
            u.telefono
            for u in self._data.values()
            if u.departamento == departamento and u.telefono
        ]


class InMemoryAjustesRepository(AjustesRepository):
    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def load(self) -> dict[str, str]:
        return dict(self._data)

    def save(self, valores: dict[str, str | None]) -> None:
        for clave, valor in valores.items():
            if valor is None:
                self._data.pop(clave, None)
            else:
                self._data[clave] = valor


class FakeBroadcaster(Broadcaster):
    def __init__(self) -> None:
        self.eventos: list[tuple[str | None, EventoTarea]] = []

    def broadcast_all(self, evento: EventoTarea) -> None:
        self.eventos.append((None, evento))

    def broadcast_to_department(self, departamento: str, evento: EventoTarea) -> None:
        self.eventos.append((departamento, evento))


class FakeNotificador(Notificador):
    def __init__(self) -> None:
        self.llamadas: list[tuple[str, str, str, int | None]] = []

    def notify(self, departamento, titulo, mensaje, tarea_id=None) -> None:
        self.llamadas.append((departamento, titulo, mensaje, tarea_id))


class FakeDespachador(Despachador):
    def __init__(self, online: set[str] | None = None) -> None:
        self.online = online or set()
        self.entregas: list[tuple[str, str, str, int | None]] = []

    def esta_online(self, departamento: str) -> bool:
        return departamento in self.online

    def entregar(self, departamento, titulo, mensaje, tarea_id=None) -> None:
        self.entregas.append((departamento, titulo, mensaje, tarea_id))


class FakePushProvider(PushProvider):
    """Registra cada envío; `expirados` y `fallan` simulan respuestas del servicio push."""

    def __init__(self, expirados: set[str] | None = None, fallan: set[str] | None = None) -> None:
        self.envios: list[tuple[dict[str, Any], str]] = []
        self._expirados = expirados or set()
        self._fallan = fallan or set()

    def enviar(self, suscripcion: dict[str, Any], payload: str) -> None:
        self.envios.append((suscripcion, payload))
        endpoint = suscripcion.get("endpoint", "")
        if endpoint in self._expirados:
            raise SuscripcionExpiradaError(endpoint, 410)
        if endpoint in self._fallan:
            raise RuntimeError("push service unavailable")


class FakeWhatsAppProvider(WhatsAppProvider):
    def __init__(self, fallan: set[str] | None = None) -> None:
        self.mensajes: list[tuple[str, str]] = []
        self._fallan = fallan or set()

    def enviar(self, telefono: str, texto: str) -> None:
        self.mensajes.append((telefono, texto))
        if telefono in self._fallan:
            raise RuntimeError("whatsapp down")


class PlainPasswordHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"plain${password}"

    def verify(self, password_hash: str, password: str) -> bool:
        return password_hash == f"plain${password}"


def suscripcion(endpoint: str, departamento: str) -> SuscripcionPush:
    return SuscripcionPush(
        endpoint=endpoint,
        departamento=departamento,
        datos={"endpoint": endpoint, "keys": {"p256dh": "k", "auth": "a"}},
    )


class EliminacionRotaSuscripcionRepository(InMemorySuscripcionRepository):
    def eliminar(self, endpoint: str) -> None:
        raise RuntimeError("db locked")
