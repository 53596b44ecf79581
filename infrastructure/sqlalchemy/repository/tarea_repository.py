import json
from typing import List

from core.domain.models.tarea import Comentario, Tarea
from core.domain.ports.tarea_repository import TareaRepository
from infrastructure.sqlalchemy.session.db import get_session, init_db
from infrastructure.sqlalchemy.model.models import TareaModel


def _to_domain(tarea_model: TareaModel) -> Tarea:
    return Tarea(
        id=tarea_model.id,
        titulo=tarea_model.titulo,
        descripcion=tarea_model.descripcion,
        departamento=tarea_model.departamento,
        estado=tarea_model.estado,
        creado_por=tarea_model.creado_por,
        creado_en=tarea_model.creado_en,
        fecha_limite=tarea_model.fecha_limite,
        comentarios=[
            Comentario.from_dict(c) for c in json.loads(tarea_model.comentarios or "[]")
        ],
    )


class SqlAlchemyTareaRepository(TareaRepository):
    def __init__(self) -> None:
        init_db()

    def save(self, tarea: Tarea) -> Tarea:
        session = get_session()
        try:
            tarea_model = TareaModel(
                id=tarea.id,
                titulo=tarea.titulo,
                descripcion=tarea.descripcion,
                departamento=tarea.departamento,
                estado=tarea.estado,
                creado_por=tarea.creado_por,
                fecha_limite=tarea.fecha_limite,
                comentarios=json.dumps(
                    [c.to_dict() for c in tarea.comentarios], ensure_ascii=False
                ),
            )
            if tarea.creado_en is not None:
                tarea_model.creado_en = tarea.creado_en
            tarea_model = session.merge(tarea_model)
            session.commit()
            tarea.id = tarea_model.id
            tarea.creado_en = tarea_model.creado_en
            return tarea
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get(self, tarea_id: int) -> Tarea | None:
        session = get_session()
        try:
            tarea_model = session.get(TareaModel, tarea_id)
            if tarea_model is None:
                return None
            return _to_domain(tarea_model)
        finally:
            session.close()

    def list(self) -> List[Tarea]:
        session = get_session()
        try:
            tarea_models = session.query(TareaModel).order_by(TareaModel.id.desc()).all()
            return [_to_domain(t) for t in tarea_models]
        finally:
            session.close()

    def list_por_departamento(self, departamento: str) -> List[Tarea]:
        session = get_session()
        try:
            tarea_models = (
                session.query(TareaModel)
                .filter(TareaModel.departamento == departamento)
                .order_by(TareaModel.id.desc())
                .all()
            )
            return [_to_domain(t) for t in tarea_models]
        finally:
            session.close()
