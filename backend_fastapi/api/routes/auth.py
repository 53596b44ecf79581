import logging

from fastapi import APIRouter, Depends, HTTPException, status

from backend_fastapi.api.deps import (
    cambiar_password_use_case,
    crear_usuario_use_case,
    login_use_case,
    usuario_admin,
)
from backend_fastapi.api.schemas import (
    ChangePasswordIn,
    LoginIn,
    LoginOut,
    OkOut,
    UserCreate,
    UserOut,
)
from core.application.autenticar import LoginCommand, LoginUseCase
from core.application.usuarios import (
    CambiarPasswordCommand,
    CambiarPasswordUseCase,
    CrearUsuarioCommand,
    CrearUsuarioUseCase,
)
from core.domain.errors import (
    CredencialesInvalidasError,
    DepartamentoInvalidoError,
    UsuarioExistenteError,
    UsuarioNoEncontradoError,
)
from core.domain.models.usuario import Usuario

logger = logging.getLogger(__name__)

router = APIRouter(tags=["usuarios"])


@router.post("/login", response_model=LoginOut, summary="Iniciar sesión")
def login(body: LoginIn, use_case: LoginUseCase = Depends(login_use_case)) -> LoginOut:
    try:
        sesion = use_case.execute(LoginCommand(username=body.username, password=body.password))
    except CredencialesInvalidasError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return LoginOut(token=sesion.token, user=UserOut.from_domain(sesion.usuario))


@router.post(
    "/users",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    summary="Crear un usuario (solo sistemas)",
)
def crear_usuario(
    body: UserCreate,
    _: Usuario = Depends(usuario_admin),
    use_case: CrearUsuarioUseCase = Depends(crear_usuario_use_case),
) -> UserOut:
    cmd = CrearUsuarioCommand(
        username=body.username,
        password=body.password,
        rol=body.role,
        departamento=body.department,
        telefono=body.phone,
    )
    try:
        return UserOut.from_domain(use_case.execute(cmd))
    except UsuarioExistenteError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except (DepartamentoInvalidoError, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/change-password", response_model=OkOut, summary="Cambiar password (solo sistemas)")
def cambiar_password(
    body: ChangePasswordIn,
    _: Usuario = Depends(usuario_admin),
    use_case: CambiarPasswordUseCase = Depends(cambiar_password_use_case),
) -> OkOut:
    try:
        use_case.execute(
            CambiarPasswordCommand(username=body.username, nueva_password=body.new_password)
        )
    except UsuarioNoEncontradoError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("Error cambiando password")
        raise HTTPException(status_code=500, detail="Error cambiando password")
    return OkOut()
