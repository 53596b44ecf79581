"""
Tokens de sesión firmados (JWT HS256).

El token lleva el usuario, su rol y su departamento para que el socket
pueda unirse a los canales correctos sin consultar la base de datos.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from core.domain.models.usuario import Usuario
from core.domain.ports.seguridad import TokenService

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"


class JwtTokenService(TokenService):
    def __init__(self, secret: str, expire_minutes: int = 720) -> None:
        self._secret = secret
        self._expire = timedelta(minutes=expire_minutes)

    def emitir(self, usuario: Usuario) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": usuario.username,
            "rol": usuario.rol,
            "departamento": usuario.departamento,
            "iat": now,
            "exp": now + self._expire,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def verificar(self, token: str) -> dict[str, Any] | None:
        try:
            return jwt.decode(token, self._secret, algorithms=[JWT_ALGORITHM])
        except jwt.ExpiredSignatureError:
            logger.info("Token expirado")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning(f"Token inválido: {e}")
            return None
