import json
from typing import List

from core.domain.models.suscripcion import SuscripcionPush
from core.domain.ports.suscripcion_repository import SuscripcionRepository
from infrastructure.peewee.model.models import SuscripcionPushModel
from infrastructure.peewee.session.db import init_db


class PeeweeSuscripcionRepository(SuscripcionRepository):
    def __init__(self):
        init_db()

    def save(self, suscripcion: SuscripcionPush) -> None:
        (
            SuscripcionPushModel.insert(
                endpoint=suscripcion.endpoint,
                departamento=suscripcion.departamento,
                subscription=json.dumps(suscripcion.datos),
            )
            .on_conflict(
                conflict_target=[SuscripcionPushModel.endpoint],
                preserve=[SuscripcionPushModel.departamento, SuscripcionPushModel.subscription],
            )
            .execute()
        )

    def list_por_departamento(self, departamento: str) -> List[SuscripcionPush]:
        query = SuscripcionPushModel.select().where(
            SuscripcionPushModel.departamento == departamento
        )
        return [
            SuscripcionPush(
                endpoint=s.endpoint,
                departamento=s.departamento,
                datos=json.loads(s.subscription),
            )
            for s in query
        ]

    def eliminar(self, endpoint: str) -> None:
        SuscripcionPushModel.delete().where(SuscripcionPushModel.endpoint == endpoint).execute()
