import os

from fastapi import APIRouter, Depends, HTTPException, status

from backend_fastapi.api.deps import suscribir_use_case, usuario_actual
from backend_fastapi.api.schemas import OkOut, SubscriptionIn
from core.application.suscribir import SuscribirCommand, SuscribirUseCase
from core.domain.models.usuario import Usuario

router = APIRouter(tags=["notificaciones"])


@router.post(
    "/subscribe",
    response_model=OkOut,
    status_code=status.HTTP_201_CREATED,
    summary="Registrar una suscripción Web Push",
)
def suscribir(
    body: SubscriptionIn,
    _: Usuario = Depends(usuario_actual),
    use_case: SuscribirUseCase = Depends(suscribir_use_case),
) -> OkOut:
    """
    Recibe el objeto `PushSubscription` del navegador. Si el endpoint ya
    estaba registrado se reemplazan su departamento y sus claves.
    """
    try:
        use_case.execute(
            SuscribirCommand(
                endpoint=body.endpoint,
                departamento=body.department,
                datos=body.datos(),
            )
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return OkOut()


@router.get("/vapid-public-key", summary="Clave pública VAPID para suscribirse")
def vapid_public_key() -> dict[str, str | None]:
    return {"publicKey": os.getenv("VAPID_PUBLIC_KEY")}
