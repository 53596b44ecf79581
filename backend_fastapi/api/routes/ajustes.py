from fastapi import APIRouter, Depends, HTTPException

from backend_fastapi.api.deps import ajustes_service, usuario_actual, usuario_admin
from backend_fastapi.api.schemas import SettingsIn, SettingsOut
from core.application.ajustes import AjustesService
from core.domain.models.usuario import Usuario

router = APIRouter(prefix="/settings", tags=["ajustes"])


@router.get("", response_model=SettingsOut, summary="Ajustes de la interfaz")
def obtener_ajustes(
    _: Usuario = Depends(usuario_actual),
    service: AjustesService = Depends(ajustes_service),
) -> SettingsOut:
    return SettingsOut(**service.load().to_dict())


@router.post("", response_model=SettingsOut, summary="Guardar ajustes (solo sistemas)")
def guardar_ajustes(
    body: SettingsIn,
    _: Usuario = Depends(usuario_admin),
    service: AjustesService = Depends(ajustes_service),
) -> SettingsOut:
    """Solo se modifican las claves enviadas; `null` borra la clave."""
    try:
        ajustes = service.save(body.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return SettingsOut(**ajustes.to_dict())
