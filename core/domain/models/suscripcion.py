from dataclasses import dataclass, field
from typing import Any

from core.domain.models.departamento import DEPARTAMENTO_GENERAL


@dataclass(slots=True)
class SuscripcionPush:
    """
    Registro de Web Push de un navegador.

    `datos` es el objeto de suscripción tal como lo entrega el navegador
    (endpoint, keys.p256dh, keys.auth); se guarda sin interpretar.
    """

    endpoint: str
    departamento: str = DEPARTAMENTO_GENERAL
    datos: dict[str, Any] = field(default_factory=dict)
