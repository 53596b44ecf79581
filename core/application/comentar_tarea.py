from dataclasses import dataclass, field
from datetime import datetime

from core.domain.errors import TareaNoEncontradaError
from core.domain.models.eventos import TareaComentada
from core.domain.models.tarea import Comentario, Tarea
from core.domain.ports.broadcaster import Broadcaster
from core.domain.ports.notificaciones import Notificador
from core.domain.ports.tarea_repository import TareaRepository


@dataclass(slots=True)
class ComentarTareaCommand:
    texto: str
    autor: str
    fecha: datetime = field(default_factory=datetime.now)


class ComentarTareaUseCase:
    def __init__(
        self,
        repository: TareaRepository,
        broadcaster: Broadcaster,
        notificador: Notificador,
    ) -> None:
        self._repository = repository
        self._broadcaster = broadcaster
        self._notificador = notificador

    def execute(self, tarea_id: int, cmd: ComentarTareaCommand) -> Tarea:
        tarea = self._repository.get(tarea_id)
        if tarea is None:
            raise TareaNoEncontradaError(tarea_id)
        return self.agregar(tarea, cmd)

    def agregar(self, tarea: Tarea, cmd: ComentarTareaCommand) -> Tarea:
        comentario = Comentario(texto=cmd.texto, autor=cmd.autor, fecha=cmd.fecha)
        tarea.comentarios.append(comentario)
        tarea = self._repository.save(tarea)

        self._broadcaster.broadcast_to_department(
            tarea.departamento, TareaComentada(id=tarea.id, comentario=comentario)
        )
        self._notificador.notify(
            tarea.departamento,
            "Nuevo comentario",
            f"{comentario.autor}: {comentario.texto}",
            tarea.id,
        )
        return tarea
