import json
from typing import List

from core.domain.models.tarea import Comentario, Tarea
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.peewee.model.models import TareaModel
from infrastructure.peewee.session.db import db, init_db


def _to_domain(model: TareaModel) -> Tarea:
    return Tarea(
        id=model.id,
        titulo=model.titulo,
        descripcion=model.descripcion,
        departamento=model.departamento,
        estado=model.estado,
        creado_por=model.creado_por,
        creado_en=model.creado_en,
        fecha_limite=model.fecha_limite,
        comentarios=[Comentario.from_dict(c) for c in json.loads(model.comentarios or "[]")],
    )


def _comentarios_json(tarea: Tarea) -> str:
    return json.dumps([c.to_dict() for c in tarea.comentarios], ensure_ascii=False)


class PeeweeTareaRepository(TareaRepository):
    def __init__(self):
        init_db()

    def save(self, tarea: Tarea) -> Tarea:
        with db.atomic():
            if tarea.id is None:
                model = TareaModel.create(
                    titulo=tarea.titulo,
                    descripcion=tarea.descripcion,
                    departamento=tarea.departamento,
                    estado=tarea.estado,
                    creado_por=tarea.creado_por,
                    fecha_limite=tarea.fecha_limite,
                    comentarios=_comentarios_json(tarea),
                )
                tarea.id = model.id
                tarea.creado_en = model.creado_en
                return tarea

            (
                TareaModel.update(
                    titulo=tarea.titulo,
                    descripcion=tarea.descripcion,
                    departamento=tarea.departamento,
                    estado=tarea.estado,
                    fecha_limite=tarea.fecha_limite,
                    comentarios=_comentarios_json(tarea),
                )
                .where(TareaModel.id == tarea.id)
                .execute()
            )
            return tarea

    def get(self, tarea_id: int) -> Tarea | None:
        try:
            return _to_domain(TareaModel.get(TareaModel.id == tarea_id))
        except TareaModel.DoesNotExist:
            return None

    def list(self) -> List[Tarea]:
        return [_to_domain(t) for t in TareaModel.select().order_by(TareaModel.id.desc())]

    def list_por_departamento(self, departamento: str) -> List[Tarea]:
        query = (
            TareaModel.select()
            .where(TareaModel.departamento == departamento)
            .order_by(TareaModel.id.desc())
        )
        return [_to_domain(t) for t in query]
