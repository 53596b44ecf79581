from core.domain.ports.ajustes_repository import AjustesRepository
from infrastructure.peewee.model.models import AjusteModel
from infrastructure.peewee.session.db import db, init_db


class PeeweeAjustesRepository(AjustesRepository):
    def __init__(self):
        init_db()

    def load(self) -> dict[str, str]:
        return {a.clave: a.valor for a in AjusteModel.select() if a.valor is not None}

    def save(self, valores: dict[str, str | None]) -> None:
        with db.atomic():
            for clave, valor in valores.items():
                if valor is None:
                    AjusteModel.delete().where(AjusteModel.clave == clave).execute()
                    continue
                (
                    AjusteModel.insert(clave=clave, valor=valor)
                    .on_conflict(conflict_target=[AjusteModel.clave], preserve=[AjusteModel.valor])
                    .execute()
                )
