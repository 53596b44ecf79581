from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text
from infrastructure.sqlalchemy.session.db import Base


class TareaModel(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    titulo = Column(String, nullable=False)
    descripcion = Column(Text, nullable=True)
    departamento = Column(String, nullable=False, index=True)
    estado = Column(String, nullable=False)
    creado_por = Column(String, nullable=True)
    creado_en = Column(DateTime, nullable=False, default=datetime.now)
    fecha_limite = Column(DateTime, nullable=True)
    comentarios = Column(Text, nullable=False, default="[]")


class UsuarioModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, nullable=False, unique=True)
    password = Column(String, nullable=False)
    rol = Column(String, nullable=False)
    departamento = Column(String, nullable=False, index=True)
    telefono = Column(String, nullable=True)


class SuscripcionPushModel(Base):
    __tablename__ = "push_subscriptions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    endpoint = Column(String, nullable=False, unique=True)
    departamento = Column(String, nullable=False, index=True)
    subscription = Column(Text, nullable=False)


class AjusteModel(Base):
    __tablename__ = "settings"

    clave = Column(String, primary_key=True)
    valor = Column(Text, nullable=True)
