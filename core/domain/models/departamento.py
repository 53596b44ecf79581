from enum import Enum


class Departamento(str, Enum):
    RECEPCION = "Recepcion"
    MANTENIMIENTO = "Mantenimiento"
    HOUSEKEEPING = "Housekeeping"
    COCINA = "Cocina"
    SEGURIDAD = "Seguridad"
    SISTEMAS = "Sistemas"


DEPARTAMENTOS: frozenset[str] = frozenset(d.value for d in Departamento)

# Departamento por defecto de las suscripciones push sin departamento.
DEPARTAMENTO_GENERAL = "general"


def es_departamento_valido(nombre: str) -> bool:
    return nombre in DEPARTAMENTOS
