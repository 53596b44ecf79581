from core.domain.errors import DepartamentoInvalidoError
from core.domain.models.departamento import es_departamento_valido
from core.domain.models.tarea import Tarea
from core.domain.models.usuario import Usuario
from core.domain.ports.tarea_repository import TareaRepository


class ListarTareasUseCase:
    def __init__(self, repository: TareaRepository) -> None:
        self._repository = repository

    def execute(self, departamento: str | None = None) -> list[Tarea]:
        if departamento is None:
            return self._repository.list()
        if not es_departamento_valido(departamento):
            raise DepartamentoInvalidoError(departamento)
        return self._repository.list_por_departamento(departamento)

    def visibles_para(self, usuario: Usuario) -> list[Tarea]:
        if usuario.ve_todos_los_departamentos:
            return self._repository.list()
        return self._repository.list_por_departamento(usuario.departamento)
