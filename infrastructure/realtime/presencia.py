import logging
import threading
from collections import Counter

from core.domain.ports.presencia import PresenciaService

logger = logging.getLogger(__name__)


class InMemoryPresencia(PresenciaService):
    """
    Presencia por departamento basada en un contador de conexiones.

    Se escribe desde el event loop (connect/disconnect de sockets) y se lee
    desde los hilos del pool de notificaciones, de ahí el lock.
    """

    def __init__(self) -> None:
        self._conexiones: Counter[str] = Counter()
        self._lock = threading.Lock()

    def mark_online(self, departamento: str) -> None:
        with self._lock:
            self._conexiones[departamento] += 1
            total = self._conexiones[departamento]
        logger.info(f"🟢 {departamento} online ({total} conexiones)")

    def mark_offline(self, departamento: str) -> None:
        with self._lock:
            if self._conexiones[departamento] <= 1:
                self._conexiones.pop(departamento, None)
                total = 0
            else:
                self._conexiones[departamento] -= 1
                total = self._conexiones[departamento]
        if total == 0:
            logger.info(f"🔴 {departamento} offline")
        else:
            logger.debug(f"{departamento}: quedan {total} conexiones")

    def is_online(self, departamento: str) -> bool:
        with self._lock:
            return self._conexiones.get(departamento, 0) > 0

    def conexiones(self, departamento: str) -> int:
        with self._lock:
            return self._conexiones.get(departamento, 0)

    def departamentos_online(self) -> list[str]:
        with self._lock:
            return sorted(self._conexiones)
