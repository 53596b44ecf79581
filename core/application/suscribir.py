import logging
from dataclasses import dataclass, field
from typing import Any

from core.domain.models.departamento import DEPARTAMENTO_GENERAL
from core.domain.models.suscripcion import SuscripcionPush
from core.domain.ports.suscripcion_repository import SuscripcionRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SuscribirCommand:
    endpoint: str
    departamento: str | None = None
    datos: dict[str, Any] = field(default_factory=dict)


class SuscribirUseCase:
    def __init__(self, repository: SuscripcionRepository) -> None:
        self._repository = repository

    def execute(self, cmd: SuscribirCommand) -> SuscripcionPush:
        if not cmd.endpoint:
            raise ValueError("La suscripción no tiene endpoint")

        departamento = cmd.departamento or DEPARTAMENTO_GENERAL
        datos = {**cmd.datos, "endpoint": cmd.endpoint}
        suscripcion = SuscripcionPush(
            endpoint=cmd.endpoint, departamento=departamento, datos=datos
        )
        self._repository.save(suscripcion)
        logger.info(f"🔥 Subscription guardada ({departamento})")
        return suscripcion
