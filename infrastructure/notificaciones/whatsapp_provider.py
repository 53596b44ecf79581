import logging

import requests

from core.domain.errors import EnvioNotificacionError
from core.domain.ports.notificaciones import WhatsAppProvider

logger = logging.getLogger(__name__)

_TIMEOUT_SECS = 10


class WhatsAppCloudProvider(WhatsAppProvider):
    """Mensajes de texto por la API de WhatsApp Cloud (Graph API)."""

    def __init__(
        self,
        api_url: str,
        phone_number_id: str,
        token: str,
        session: requests.Session | None = None,
    ) -> None:
        self._url = f"{api_url.rstrip('/')}/{phone_number_id}/messages"
        self._token = token
        self._session = session or requests.Session()

    def enviar(self, telefono: str, texto: str) -> None:
        payload = {
            "messaging_product": "whatsapp",
            "to": telefono,
            "type": "text",
            "text": {"body": texto},
        }
        try:
            r = self._session.post(
                self._url,
                json=payload,
                headers={"Authorization": f"Bearer {self._token}"},
                timeout=_TIMEOUT_SECS,
            )
        except requests.RequestException as e:
            raise EnvioNotificacionError(f"Error al conectar con WhatsApp: {e}") from e

        if r.status_code >= 400:
            raise EnvioNotificacionError(f"WhatsApp respondió {r.status_code}: {r.text}")
        logger.debug(f"WhatsApp enviado a {telefono}")
