"""
Pool acotado para entregar notificaciones fuera del hilo de la request.

Las llamadas a proveedores son lentas y no deben retrasar la respuesta HTTP.
Se limita el número de trabajos pendientes: si el pool está lleno el trabajo
se rechaza y queda contado, en vez de acumularse sin límite.

La presencia se consulta al momento del aviso, en el hilo que lo emite; el
worker solo entrega.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor

from core.domain.ports.notificaciones import Despachador, Notificador

logger = logging.getLogger(__name__)


class PoolNotificaciones(Notificador):
    def __init__(
        self,
        despachador: Despachador,
        max_workers: int = 4,
        max_pendientes: int = 100,
    ) -> None:
        self._despachador = despachador
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="Notificaciones"
        )
        self._cupos = threading.BoundedSemaphore(max_pendientes)
        self._lock = threading.Lock()
        self._vacio = threading.Condition(self._lock)
        self._en_curso: set[Future] = set()

        self.enviadas = 0
        self.completadas = 0
        self.fallidas = 0
        self.rechazadas = 0
        self.solo_realtime = 0

    @property
    def pendientes(self) -> int:
        with self._lock:
            return len(self._en_curso)

    def notify(
        self,
        departamento: str,
        titulo: str,
        mensaje: str,
        tarea_id: int | None = None,
    ) -> None:
        if self._despachador.esta_online(departamento):
            with self._lock:
                self.solo_realtime += 1
            return

        if not self._cupos.acquire(blocking=False):
            with self._lock:
                self.rechazadas += 1
            logger.warning(f"⛔ Pool de notificaciones lleno, se descarta aviso a {departamento}")
            return

        try:
            future = self._executor.submit(
                self._despachador.entregar, departamento, titulo, mensaje, tarea_id
            )
        except RuntimeError:
            # El executor ya está cerrado.
            self._cupos.release()
            with self._lock:
                self.rechazadas += 1
            logger.warning(f"Pool cerrado, se descarta aviso a {departamento}")
            return

        with self._lock:
            self.enviadas += 1
            self._en_curso.add(future)
        future.add_done_callback(self._terminado)

    def _terminado(self, future: Future) -> None:
        self._cupos.release()
        error = None if future.cancelled() else future.exception()
        with self._lock:
            self._en_curso.discard(future)
            if error is None:
                self.completadas += 1
            else:
                self.fallidas += 1
            if not self._en_curso:
                self._vacio.notify_all()
        if error is not None:
            logger.error(f"❌ Notificación fallida: {error}")

    def esperar(self, timeout: float | None = None) -> bool:
        """Espera a los trabajos en curso. True si todos terminaron a tiempo."""
        with self._vacio:
            return self._vacio.wait_for(lambda: not self._en_curso, timeout=timeout)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
        logger.info("Pool de notificaciones detenido")
