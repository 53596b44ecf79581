import logging
from dataclasses import dataclass
from datetime import datetime

from core.domain.errors import DepartamentoInvalidoError
from core.domain.models.departamento import es_departamento_valido
from core.domain.models.eventos import TareaCreada
from core.domain.models.tarea import ESTADO_ABIERTO, Tarea
from core.domain.ports.broadcaster import Broadcaster
from core.domain.ports.notificaciones import Notificador
from core.domain.ports.tarea_repository import TareaRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CrearTareaCommand:
    titulo: str
    departamento: str
    descripcion: str | None = None
    fecha_limite: datetime | None = None
    usuario: str | None = None


class CrearTareaUseCase:
    def __init__(
        self,
        repository: TareaRepository,
        broadcaster: Broadcaster,
        notificador: Notificador,
    ) -> None:
        self._repository = repository
        self._broadcaster = broadcaster
        self._notificador = notificador

    def execute(self, cmd: CrearTareaCommand) -> Tarea:
        if not es_departamento_valido(cmd.departamento):
            raise DepartamentoInvalidoError(cmd.departamento)

        tarea = self._repository.save(
            Tarea(
                titulo=cmd.titulo,
                descripcion=cmd.descripcion,
                departamento=cmd.departamento,
                estado=ESTADO_ABIERTO,
                creado_por=cmd.usuario,
                fecha_limite=cmd.fecha_limite,
            )
        )
        logger.info(f"📝 Tarea {tarea.id} creada para {tarea.departamento}")

        self._broadcaster.broadcast_to_department(tarea.departamento, TareaCreada(tarea))
        self._notificador.notify(
            tarea.departamento,
            "Nueva tarea",
            f"{tarea.titulo} - {tarea.departamento}",
            tarea.id,
        )
        return tarea
