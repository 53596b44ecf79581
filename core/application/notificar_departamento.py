"""
Entrega de notificaciones a un departamento sin conexión en tiempo real.

Si el departamento tiene al menos un socket abierto el evento de tiempo real
basta y no se contacta a ningún proveedor. Si no, se intenta Web Push por
cada suscripción guardada y/o WhatsApp por cada teléfono del departamento.
"""

import json
import logging
from dataclasses import dataclass, field

from core.domain.errors import SuscripcionExpiradaError
from core.domain.ports.notificaciones import (
    Despachador,
    Notificador,
    PushProvider,
    WhatsAppProvider,
)
from core.domain.ports.presencia import PresenciaService
from core.domain.ports.suscripcion_repository import SuscripcionRepository
from core.domain.ports.usuario_repository import UsuarioRepository

logger = logging.getLogger(__name__)

CANAL_PUSH = "push"
CANAL_WHATSAPP = "whatsapp"


@dataclass(slots=True)
class ResultadoNotificacion:
    departamento: str
    solo_realtime: bool = False
    intentos: int = 0
    entregadas: int = 0
    fallidas: int = 0
    eliminadas: list[str] = field(default_factory=list)


class NotificarDepartamentoUseCase(Notificador, Despachador):
    def __init__(
        self,
        presencia: PresenciaService,
        suscripciones: SuscripcionRepository,
        usuarios: UsuarioRepository | None = None,
        push: PushProvider | None = None,
        whatsapp: WhatsAppProvider | None = None,
    ) -> None:
        self._presencia = presencia
        self._suscripciones = suscripciones
        self._usuarios = usuarios
        self._push = push
        self._whatsapp = whatsapp

    @property
    def canales(self) -> list[str]:
        canales = []
        if self._push is not None:
            canales.append(CANAL_PUSH)
        if self._whatsapp is not None and self._usuarios is not None:
            canales.append(CANAL_WHATSAPP)
        return canales

    def notify(
        self,
        departamento: str,
        titulo: str,
        mensaje: str,
        tarea_id: int | None = None,
    ) -> ResultadoNotificacion:
        if self.esta_online(departamento):
            return ResultadoNotificacion(departamento=departamento, solo_realtime=True)
        return self.entregar(departamento, titulo, mensaje, tarea_id)

    def esta_online(self, departamento: str) -> bool:
        if self._presencia.is_online(departamento):
            logger.info(f"⚡ {departamento} online → solo socket")
            return True
        return False

    def entregar(
        self,
        departamento: str,
        titulo: str,
        mensaje: str,
        tarea_id: int | None = None,
    ) -> ResultadoNotificacion:
        """Envía por los canales habilitados sin volver a consultar la presencia."""
        resultado = ResultadoNotificacion(departamento=departamento)

        if self._push is not None:
            self._enviar_push(resultado, titulo, mensaje, tarea_id)
        if self._whatsapp is not None and self._usuarios is not None:
            self._enviar_whatsapp(resultado, titulo, mensaje)

        logger.info(
            f"📨 {departamento}: {resultado.entregadas}/{resultado.intentos} entregadas, "
            f"{len(resultado.eliminadas)} suscripciones eliminadas"
        )
        return resultado

    def _enviar_push(
        self,
        resultado: ResultadoNotificacion,
        titulo: str,
        mensaje: str,
        tarea_id: int | None,
    ) -> None:
        payload = json.dumps({"title": titulo, "body": mensaje, "taskId": tarea_id})

        for suscripcion in self._suscripciones.list_por_departamento(resultado.departamento):
            resultado.intentos += 1
            try:
                self._push.enviar(suscripcion.datos, payload)
                resultado.entregadas += 1
            except SuscripcionExpiradaError as e:
                logger.info(f"🧹 Suscripción expirada ({e.status_code}), se elimina")
                resultado.fallidas += 1
                try:
                    self._suscripciones.eliminar(suscripcion.endpoint)
                    resultado.eliminadas.append(suscripcion.endpoint)
                except Exception as e:
                    logger.error(f"No se pudo eliminar la suscripción expirada: {e}")
            except Exception as e:
                logger.error(f"Push error: {e}")
                resultado.fallidas += 1

    def _enviar_whatsapp(
        self,
        resultado: ResultadoNotificacion,
        titulo: str,
        mensaje: str,
    ) -> None:
        texto = f"{titulo}\n{mensaje}"

        for telefono in self._usuarios.telefonos_por_departamento(resultado.departamento):
            resultado.intentos += 1
            try:
                self._whatsapp.enviar(telefono, texto)
                resultado.entregadas += 1
            except Exception as e:
                logger.error(f"WhatsApp error ({telefono}): {e}")
                resultado.fallidas += 1
