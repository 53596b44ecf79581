from core.domain.ports.ajustes_repository import AjustesRepository
from infrastructure.sqlalchemy.session.db import get_session, init_db
from infrastructure.sqlalchemy.model.models import AjusteModel


class SqlAlchemyAjustesRepository(AjustesRepository):
    def __init__(self) -> None:
        init_db()

    def load(self) -> dict[str, str]:
        session = get_session()
        try:
            return {
                a.clave: a.valor
                for a in session.query(AjusteModel).all()
                if a.valor is not None
            }
        finally:
            session.close()

    def save(self, valores: dict[str, str | None]) -> None:
        session = get_session()
        try:
            for clave, valor in valores.items():
                if valor is None:
                    session.query(AjusteModel).filter(AjusteModel.clave == clave).delete()
                else:
                    session.merge(AjusteModel(clave=clave, valor=valor))
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
