from dataclasses import dataclass

from core.application.comentar_tarea import ComentarTareaCommand, ComentarTareaUseCase
from core.domain.errors import TareaNoEncontradaError
from core.domain.models.eventos import EstadoTareaCambiado
from core.domain.models.tarea import Tarea
from core.domain.ports.broadcaster import Broadcaster
from core.domain.ports.notificaciones import Notificador
from core.domain.ports.tarea_repository import TareaRepository


@dataclass(slots=True)
class EditarTareaCommand:
    """Cambios parciales: solo se aplica lo que no es None."""

    estado: str | None = None
    comentario: ComentarTareaCommand | None = None


class EditarTareaUseCase:
    def __init__(
        self,
        repository: TareaRepository,
        broadcaster: Broadcaster,
        notificador: Notificador,
    ) -> None:
        self._repository = repository
        self._broadcaster = broadcaster
        self._notificador = notificador
        self._comentar = ComentarTareaUseCase(repository, broadcaster, notificador)

    def execute(self, tarea_id: int, cmd: EditarTareaCommand) -> Tarea:
        tarea = self._repository.get(tarea_id)
        if tarea is None:
            raise TareaNoEncontradaError(tarea_id)

        if cmd.estado is not None and cmd.estado != tarea.estado:
            tarea.estado = cmd.estado
            tarea = self._repository.save(tarea)

            self._broadcaster.broadcast_to_department(
                tarea.departamento, EstadoTareaCambiado(id=tarea.id, estado=tarea.estado)
            )
            self._notificador.notify(
                tarea.departamento,
                "Estado actualizado",
                f"Nuevo estado: {tarea.estado}",
                tarea.id,
            )

        if cmd.comentario is not None:
            tarea = self._comentar.agregar(tarea, cmd.comentario)

        return tarea
