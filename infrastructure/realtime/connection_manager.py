"""
Fan-out de eventos de tareas a los sockets conectados.

Cada conexión se une al canal de su departamento; las de roles globales
reciben todos los canales. Los casos de uso publican desde hilos del
threadpool de FastAPI, así que los envíos se agendan en el event loop
dueño de los sockets.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from fastapi import WebSocket

from core.domain.models.eventos import EventoTarea
from core.domain.ports.broadcaster import Broadcaster

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Conexion:
    websocket: WebSocket
    departamento: str
    ve_todo: bool = False
    canales: set[str] = field(default_factory=set)

    def recibe(self, departamento: str | None) -> bool:
        if departamento is None or self.ve_todo:
            return True
        return departamento in self.canales


class ConnectionManager(Broadcaster):
    def __init__(self) -> None:
        self._conexiones: list[Conexion] = []
        self._loop: asyncio.AbstractEventLoop | None = None
        self._tareas: set[asyncio.Task] = set()

    @property
    def total(self) -> int:
        return len(self._conexiones)

    async def connect(
        self, websocket: WebSocket, departamento: str, ve_todo: bool = False
    ) -> Conexion:
        await websocket.accept()
        self._loop = asyncio.get_running_loop()
        conexion = Conexion(
            websocket=websocket,
            departamento=departamento,
            ve_todo=ve_todo,
            canales={departamento},
        )
        self._conexiones.append(conexion)
        return conexion

    def disconnect(self, conexion: Conexion) -> None:
        if conexion in self._conexiones:
            self._conexiones.remove(conexion)

    async def enviar(self, departamento: str | None, mensaje: dict[str, Any]) -> int:
        """Envía `mensaje` a las conexiones del canal; devuelve cuántas lo recibieron."""
        enviados = 0
        for conexion in list(self._conexiones):
            if not conexion.recibe(departamento):
                continue
            try:
                await conexion.websocket.send_json(mensaje)
                enviados += 1
            except Exception as e:
                logger.warning(f"Socket de {conexion.departamento} descartado: {e}")
                self.disconnect(conexion)
        return enviados

    def broadcast_all(self, evento: EventoTarea) -> None:
        self._agendar(None, evento.to_message())

    def broadcast_to_department(self, departamento: str, evento: EventoTarea) -> None:
        self._agendar(departamento, evento.to_message())

    def _agendar(self, departamento: str | None, mensaje: dict[str, Any]) -> None:
        loop = self._loop
        if loop is None or loop.is_closed() or not self._conexiones:
            return

        try:
            en_loop = asyncio.get_running_loop() is loop
        except RuntimeError:
            en_loop = False

        if en_loop:
            tarea = loop.create_task(self.enviar(departamento, mensaje))
            self._tareas.add(tarea)
            tarea.add_done_callback(self._tareas.discard)
        else:
            asyncio.run_coroutine_threadsafe(self.enviar(departamento, mensaje), loop)
