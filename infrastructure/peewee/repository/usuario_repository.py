from typing import List

from core.domain.models.usuario import Usuario
from core.domain.ports.usuario_repository import UsuarioRepository
from infrastructure.peewee.model.models import UsuarioModel
from infrastructure.peewee.session.db import db, init_db


class PeeweeUsuarioRepository(UsuarioRepository):
    def __init__(self):
        init_db()

    def get(self, username: str) -> Usuario | None:
        try:
            u = UsuarioModel.get(UsuarioModel.username == username)
        except UsuarioModel.DoesNotExist:
            return None
        return Usuario(
            id=u.id,
            username=u.username,
            password_hash=u.password,
            rol=u.rol,
            departamento=u.departamento,
            telefono=u.telefono,
        )

    def save(self, usuario: Usuario) -> Usuario:
        with db.atomic():
            if usuario.id is None:
                usuario.id = UsuarioModel.create(
                    username=usuario.username,
                    password=usuario.password_hash,
                    rol=usuario.rol,
                    departamento=usuario.departamento,
                    telefono=usuario.telefono,
                ).id
            else:
                UsuarioModel.update(
                    password=usuario.password_hash,
                    rol=usuario.rol,
                    departamento=usuario.departamento,
                    telefono=usuario.telefono,
                ).where(UsuarioModel.id == usuario.id).execute()
        return usuario

    def telefonos_por_departamento(self, departamento: str) -> List[str]:
        query = UsuarioModel.select(UsuarioModel.telefono).where(
            (UsuarioModel.departamento == departamento)
            & UsuarioModel.telefono.is_null(False)
            & (UsuarioModel.telefono != "")
        )
        return [u.telefono for u in query]
