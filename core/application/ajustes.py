from core.domain.models.ajustes import AjustesUI
from core.domain.ports.ajustes_repository import AjustesRepository


class AjustesService:
    """Acceso tipado a la configuración de la interfaz (logo, nombre, color)."""

    def __init__(self, repository: AjustesRepository) -> None:
        self._repository = repository

    def load(self) -> AjustesUI:
        return AjustesUI.from_dict(self._repository.load())

    def save(self, cambios: dict[str, str | None]) -> AjustesUI:
        desconocidas = set(cambios) - set(AjustesUI.claves())
        if desconocidas:
            raise ValueError(f"Ajustes desconocidos: {', '.join(sorted(desconocidas))}")

        ajustes = self.load().to_dict()
        ajustes.update(cambios)
        self._repository.save(ajustes)
        return AjustesUI.from_dict({k: v for k, v in ajustes.items() if v is not None})
