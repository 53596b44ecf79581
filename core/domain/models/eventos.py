"""
Eventos de tiempo real del tablero.

Todos viajan por el socket con el nombre `task_update` y un campo `type`
que distingue la variante.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from core.domain.models.tarea import Comentario, Tarea

NOMBRE_EVENTO = "task_update"


def tarea_a_dict(tarea: Tarea) -> dict[str, Any]:
    def _iso(valor: datetime | None) -> str | None:
        return valor.isoformat() if valor else None

    return {
        "id": tarea.id,
        "title": tarea.titulo,
        "description": tarea.descripcion,
        "department": tarea.departamento,
        "status": tarea.estado,
        "created_by": tarea.creado_por,
        "created_at": _iso(tarea.creado_en),
        "due_date": _iso(tarea.fecha_limite),
        "comments": [c.to_dict() for c in tarea.comentarios],
    }


@dataclass(frozen=True, slots=True)
class TareaCreada:
    tarea: Tarea

    def to_message(self) -> dict[str, Any]:
        return {
            "event": NOMBRE_EVENTO,
            "type": "task_created",
            "task": tarea_a_dict(self.tarea),
        }


@dataclass(frozen=True, slots=True)
class EstadoTareaCambiado:
    id: int
    estado: str

    def to_message(self) -> dict[str, Any]:
        return {
            "event": NOMBRE_EVENTO,
            "type": "task_status_changed",
            "id": self.id,
            "status": self.estado,
        }


@dataclass(frozen=True, slots=True)
class TareaComentada:
    id: int
    comentario: Comentario

    def to_message(self) -> dict[str, Any]:
        return {
            "event": NOMBRE_EVENTO,
            "type": "task_commented",
            "id": self.id,
            "comment": self.comentario.to_dict(),
        }


EventoTarea = TareaCreada | EstadoTareaCambiado | TareaComentada
