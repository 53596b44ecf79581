import json

from core.domain.models.suscripcion import SuscripcionPush
from core.domain.ports.suscripcion_repository import SuscripcionRepository
from infrastructure.sqlalchemy.session.db import get_session, init_db
from infrastructure.sqlalchemy.model.models import SuscripcionPushModel


class SqlAlchemySuscripcionRepository(SuscripcionRepository):
    def __init__(self) -> None:
        init_db()

    def save(self, suscripcion: SuscripcionPush) -> None:
        session = get_session()
        try:
            existente = (
                session.query(SuscripcionPushModel)
                .filter(SuscripcionPushModel.endpoint == suscripcion.endpoint)
                .one_or_none()
            )
            if existente is None:
                existente = SuscripcionPushModel(endpoint=suscripcion.endpoint)
                session.add(existente)
            existente.departamento = suscripcion.departamento
            existente.subscription = json.dumps(suscripcion.datos)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def list_por_departamento(self, departamento: str) -> list[SuscripcionPush]:
        session = get_session()
        try:
            rows = (
                session.query(SuscripcionPushModel)
                .filter(SuscripcionPushModel.departamento == departamento)
                .all()
            )
            return [
                SuscripcionPush(
                    endpoint=row.endpoint,
                    departamento=row.departamento,
                    datos=json.loads(row.subscription),
                )
                for row in rows
            ]
        finally:
            session.close()

    def eliminar(self, endpoint: str) -> None:
        session = get_session()
        try:
            session.query(SuscripcionPushModel).filter(
                SuscripcionPushModel.endpoint == endpoint
            ).delete()
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
