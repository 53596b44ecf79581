class TareaNoEncontradaError(ValueError):
    def __init__(self, tarea_id: int) -> None:
        super().__init__(f"Tarea con id {tarea_id} no encontrada")
        self.tarea_id = tarea_id


class DepartamentoInvalidoError(ValueError):
    def __init__(self, departamento: str) -> None:
        super().__init__(f"Departamento '{departamento}' no es válido")
        self.departamento = departamento


class CredencialesInvalidasError(ValueError):
    pass


class UsuarioNoEncontradoError(ValueError):
    def __init__(self, username: str) -> None:
        super().__init__(f"Usuario '{username}' no encontrado")
        self.username = username


class UsuarioExistenteError(ValueError):
    def __init__(self, username: str) -> None:
        super().__init__(f"Usuario '{username}' ya existe")
        self.username = username


class SuscripcionExpiradaError(Exception):
    """El proveedor push reporta que el endpoint ya no existe (404/410)."""

    def __init__(self, endpoint: str, status_code: int) -> None:
        super().__init__(f"Suscripción expirada ({status_code}): {endpoint}")
        self.endpoint = endpoint
        self.status_code = status_code


class EnvioNotificacionError(Exception):
    pass
