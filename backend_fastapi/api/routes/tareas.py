import logging

from fastapi import APIRouter, Depends, HTTPException, status

from backend_fastapi.api.deps import (
    comentar_tarea_use_case,
    crear_tarea_use_case,
    editar_tarea_use_case,
    listar_tareas_use_case,
    usuario_actual,
)
from backend_fastapi.api.schemas import CommentIn, TaskCreate, TaskOut, TaskUpdate
from core.application.comentar_tarea import ComentarTareaCommand, ComentarTareaUseCase
from core.application.crear_tarea import CrearTareaCommand, CrearTareaUseCase
from core.application.editar_tarea import EditarTareaCommand, EditarTareaUseCase
from core.application.listar_tareas import ListarTareasUseCase
from core.domain.errors import DepartamentoInvalidoError, TareaNoEncontradaError
from core.domain.models.usuario import Usuario

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tareas"])


def _comentario(body: CommentIn, usuario: Usuario) -> ComentarTareaCommand:
    cmd = ComentarTareaCommand(texto=body.texto, autor=body.user or usuario.username)
    if body.fecha is not None:
        cmd.fecha = body.fecha
    return cmd


@router.post(
    "",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def crear_tarea(
    body: TaskCreate,
    usuario: Usuario = Depends(usuario_actual),
    use_case: CrearTareaUseCase = Depends(crear_tarea_use_case),
) -> TaskOut:
    """
    Crea una tarea en estado `abierto`, la publica por socket al departamento
    y, si el departamento no está conectado, le envía una notificación.

    - **title**: Título de la tarea.
    - **department**: Departamento responsable (debe existir).
    - **due_date**: Fecha límite opcional.
    - **user**: Autor; por defecto el usuario de la sesión.
    """
    cmd = CrearTareaCommand(
        titulo=body.title,
        descripcion=body.description,
        departamento=body.department,
        fecha_limite=body.due_date,
        usuario=body.user or usuario.username,
    )
    try:
        return TaskOut.from_domain(use_case.execute(cmd))
    except DepartamentoInvalidoError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.exception("Error creando tarea")
        raise HTTPException(status_code=500, detail=str(e))


@router.get(
    "",
    response_model=list[TaskOut],
    summary="Listar las tareas visibles para el usuario",
)
def listar_tareas(
    usuario: Usuario = Depends(usuario_actual),
    use_case: ListarTareasUseCase = Depends(listar_tareas_use_case),
) -> list[TaskOut]:
    """
    Roles globales (sistemas, gerencia) ven todas las tareas; el resto,
    solo las de su departamento.
    """
    return [TaskOut.from_domain(t) for t in use_case.visibles_para(usuario)]


@router.get(
    "/{department}",
    response_model=list[TaskOut],
    summary="Listar las tareas de un departamento",
)
def listar_tareas_departamento(
    department: str,
    usuario: Usuario = Depends(usuario_actual),
    use_case: ListarTareasUseCase = Depends(listar_tareas_use_case),
) -> list[TaskOut]:
    if not usuario.ve_todos_los_departamentos and department != usuario.departamento:
        raise HTTPException(status_code=403, detail="Departamento no permitido")
    try:
        return [TaskOut.from_domain(t) for t in use_case.execute(department)]
    except DepartamentoInvalidoError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.put(
    "/{tarea_id}",
    response_model=TaskOut,
    summary="Actualizar estado y/o agregar un comentario",
)
def editar_tarea(
    tarea_id: int,
    body: TaskUpdate,
    usuario: Usuario = Depends(usuario_actual),
    use_case: EditarTareaUseCase = Depends(editar_tarea_use_case),
) -> TaskOut:
    """
    Cuerpo parcial: solo se aplica lo que viene.

    - **status**: Nuevo estado.
    - **comment**: Comentario a agregar (`texto`, `user`, `fecha`).
    """
    cmd = EditarTareaCommand(
        estado=body.status,
        comentario=_comentario(body.comment, usuario) if body.comment else None,
    )
    try:
        return TaskOut.from_domain(use_case.execute(tarea_id, cmd))
    except TareaNoEncontradaError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Error actualizando tarea {tarea_id}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/{tarea_id}/comentario",
    response_model=TaskOut,
    summary="Agregar un comentario a una tarea",
)
def comentar_tarea(
    tarea_id: int,
    body: CommentIn,
    usuario: Usuario = Depends(usuario_actual),
    use_case: ComentarTareaUseCase = Depends(comentar_tarea_use_case),
) -> TaskOut:
    try:
        return TaskOut.from_domain(use_case.execute(tarea_id, _comentario(body, usuario)))
    except TareaNoEncontradaError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception(f"Error comentando tarea {tarea_id}")
        raise HTTPException(status_code=500, detail=str(e))
