from datetime import datetime

from peewee import (
    AutoField,
    CharField,
    DateTimeField,
    Model,
    TextField,
)
from infrastructure.peewee.session.db import db


class BaseModel(Model):
    class Meta:
        database = db


class TareaModel(BaseModel):
    id = AutoField()
    titulo = CharField()
    descripcion = TextField(null=True)
    departamento = CharField(index=True)
    estado = CharField()
    creado_por = CharField(null=True)
    creado_en = DateTimeField(default=datetime.now)
    fecha_limite = DateTimeField(null=True)
    comentarios = TextField(default="[]")

    class Meta:
        table_name = "tasks"


class UsuarioModel(BaseModel):
    id = AutoField()
    username = CharField(unique=True)
    password = CharField()
    rol = CharField()
    departamento = CharField(index=True)
    telefono = CharField(null=True)

    class Meta:
        table_name = "users"


class SuscripcionPushModel(BaseModel):
    id = AutoField()
    endpoint = CharField(unique=True, max_length=1024)
    departamento = CharField(index=True)
    subscription = TextField()

    class Meta:
        table_name = "push_subscriptions"


class AjusteModel(BaseModel):
    clave = CharField(primary_key=True)
    valor = TextField(null=True)

    class Meta:
        table_name = "settings"


ALL_MODELS = [TareaModel, UsuarioModel, SuscripcionPushModel, AjusteModel]
