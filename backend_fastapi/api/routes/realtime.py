import logging

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status

from backend_fastapi.api.deps import connection_manager, presencia, token_service
from core.domain.models.departamento import es_departamento_valido
from core.domain.models.usuario import ROLES_GLOBALES
from core.domain.ports.presencia import PresenciaService
from core.domain.ports.seguridad import TokenService
from infrastructure.realtime.connection_manager import ConnectionManager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tiempo real"])


@router.websocket("/ws")
async def socket_tareas(
    websocket: WebSocket,
    department: str | None = Query(default=None),
    token: str | None = Query(default=None),
    tokens: TokenService = Depends(token_service),
    manager: ConnectionManager = Depends(connection_manager),
    presencia_service: PresenciaService = Depends(presencia),
) -> None:
    claims = tokens.verificar(token) if token else None
    if claims is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    ve_todo = claims.get("rol") in ROLES_GLOBALES
    departamento = department or claims.get("departamento")
    if not departamento or not es_departamento_valido(departamento):
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    if not ve_todo and departamento != claims.get("departamento"):
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    conexion = await manager.connect(websocket, departamento, ve_todo=ve_todo)
    presencia_service.mark_online(departamento)
    try:
        await websocket.send_json({"event": "connected", "department": departamento})
        while True:
            mensaje = await websocket.receive_text()
            if mensaje == "ping":
                await websocket.send_json({"event": "pong"})
    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(conexion)
        presencia_service.mark_offline(departamento)
