from typing import Any

from pywebpush import WebPushException, webpush

from core.domain.errors import EnvioNotificacionError, SuscripcionExpiradaError
from core.domain.ports.notificaciones import PushProvider

# Códigos con los que el servicio push indica que la suscripción ya no existe.
_STATUS_EXPIRADA = (404, 410)
_TIMEOUT_SECS = 10


class WebPushProvider(PushProvider):
    def __init__(self, vapid_private_key: str, claims_email: str) -> None:
        self._vapid_private_key = vapid_private_key
        self._claims_email = claims_email

    def enviar(self, suscripcion: dict[str, Any], payload: str) -> None:
        try:
            webpush(
                subscription_info=suscripcion,
                data=payload,
                vapid_private_key=self._vapid_private_key,
                # pywebpush completa `aud`/`exp` sobre el dict recibido
                vapid_claims={"sub": f"mailto:{self._claims_email}"},
                timeout=_TIMEOUT_SECS,
            )
        except WebPushException as e:
            status_code = e.response.status_code if e.response is not None else None
            if status_code in _STATUS_EXPIRADA:
                raise SuscripcionExpiradaError(suscripcion.get("endpoint", ""), status_code) from e
            raise EnvioNotificacionError(str(e)) from e
