from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

ESTADO_ABIERTO = "abierto"


@dataclass(slots=True)
class Comentario:
    texto: str
    autor: str
    fecha: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "texto": self.texto,
            "autor": self.autor,
            "fecha": self.fecha.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Comentario":
        fecha = data.get("fecha")
        return cls(
            texto=data["texto"],
            autor=data.get("autor", ""),
            fecha=datetime.fromisoformat(fecha) if fecha else datetime.now(),
        )


@dataclass(slots=True)
class Tarea:
    titulo: str
    departamento: str
    id: int | None = None
    descripcion: str | None = None
    estado: str = ESTADO_ABIERTO
    creado_por: str | None = None
    creado_en: datetime | None = None
    fecha_limite: datetime | None = None
    comentarios: list[Comentario] = field(default_factory=list)
