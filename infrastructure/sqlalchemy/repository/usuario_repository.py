from core.domain.models.usuario import Usuario
from core.domain.ports.usuario_repository import UsuarioRepository
from infrastructure.sqlalchemy.session.db import get_session, init_db
from infrastructure.sqlalchemy.model.models import UsuarioModel


class SqlAlchemyUsuarioRepository(UsuarioRepository):
    def __init__(self) -> None:
        init_db()

    def get(self, username: str) -> Usuario | None:
        session = get_session()
        try:
            u = (
                session.query(UsuarioModel)
                .filter(UsuarioModel.username == username)
                .one_or_none()
            )
            if u is None:
                return None
            return Usuario(
                id=u.id,
                username=u.username,
                password_hash=u.password,
                rol=u.rol,
                departamento=u.departamento,
                telefono=u.telefono,
            )
        finally:
            session.close()

    def save(self, usuario: Usuario) -> Usuario:
        session = get_session()
        try:
            usuario_model = session.merge(
                UsuarioModel(
                    id=usuario.id,
                    username=usuario.username,
                    password=usuario.password_hash,
                    rol=usuario.rol,
                    departamento=usuario.departamento,
                    telefono=usuario.telefono,
                )
            )
            session.commit()
            usuario.id = usuario_model.id
            return usuario
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def telefonos_por_departamento(self, departamento: str) -> list[str]:
        session = get_session()
        try:
            rows = (
                session.query(UsuarioModel.telefono)
                .filter(
                    UsuarioModel.departamento == departamento,
                    UsuarioModel.telefono.isnot(None),
                    UsuarioModel.telefono != "",
                )
                .all()
            )
            return [row.telefono for row in rows]
        finally:
            session.close()
