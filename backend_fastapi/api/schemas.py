from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core.domain.models.eventos import tarea_a_dict
from core.domain.models.tarea import Tarea
from core.domain.models.usuario import Usuario


class CommentIn(BaseModel):
    texto: str = Field(min_length=1)
    user: str | None = None
    fecha: datetime | None = None


class CommentOut(BaseModel):
    texto: str
    autor: str
    fecha: datetime


class TaskCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str | None = None
    department: str
    due_date: datetime | None = None
    user: str | None = None


class TaskUpdate(BaseModel):
    status: str | None = Field(default=None, min_length=1)
    comment: CommentIn | None = None


class TaskOut(BaseModel):
    id: int
    title: str
    description: str | None = None
    department: str
    status: str
    created_by: str | None = None
    created_at: datetime | None = None
    due_date: datetime | None = None
    comments: list[CommentOut] = []

    @classmethod
    def from_domain(cls, tarea: Tarea) -> "TaskOut":
        return cls.model_validate(tarea_a_dict(tarea))


class LoginIn(BaseModel):
    username: str
    password: str


class UserOut(BaseModel):
    id: int | None = None
    username: str
    role: str
    department: str
    phone: str | None = None

    @classmethod
    def from_domain(cls, usuario: Usuario) -> "UserOut":
        return cls(
            id=usuario.id,
            username=usuario.username,
            role=usuario.rol,
            department=usuario.departamento,
            phone=usuario.telefono,
        )


class LoginOut(BaseModel):
    token: str
    user: UserOut


class UserCreate(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=4)
    role: str
    department: str
    phone: str | None = None


class ChangePasswordIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str
    new_password: str = Field(alias="newPassword", min_length=4)


class SubscriptionIn(BaseModel):
    """Objeto PushSubscription del navegador más el departamento."""

    model_config = ConfigDict(extra="allow")

    endpoint: str = Field(min_length=1)
    department: str | None = None
    keys: dict[str, Any] = {}

    def datos(self) -> dict[str, Any]:
        return self.model_dump(exclude={"department"})


class SettingsIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    logo: str | None = None
    nombre_hotel: str | None = None
    color_primario: str | None = None


class SettingsOut(BaseModel):
    logo: str | None = None
    nombre_hotel: str | None = None
    color_primario: str | None = None


class OkOut(BaseModel):
    ok: bool = True
