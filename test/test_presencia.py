import pytest

from infrastructure.realtime.presencia import InMemoryPresencia


@pytest.fixture
def presencia():
    return InMemoryPresencia()


@pytest.mark.parametrize("departamento", ["Mantenimiento", "Housekeeping", "Recepcion"])
def test_online_y_offline(presencia, departamento):
    assert presencia.is_online(departamento) is False

    presencia.mark_online(departamento)
    assert presencia.is_online(departamento) is True

    presencia.mark_offline(departamento)
    assert presencia.is_online(departamento) is False


def test_dos_conexiones_una_desconexion_sigue_online(presencia):
    presencia.mark_online("Mantenimiento")
    presencia.mark_online("Mantenimiento")

    presencia.mark_offline("Mantenimiento")

    assert presencia.is_online("Mantenimiento") is True
    assert presencia.conexiones("Mantenimiento") == 1

    presencia.mark_offline("Mantenimiento")
    assert presencia.is_online("Mantenimiento") is False


def test_offline_sin_conexiones_no_queda_negativo(presencia):
    presencia.mark_offline("Cocina")
    presencia.mark_online("Cocina")

    assert presencia.is_online("Cocina") is True
    assert presencia.conexiones("Cocina") == 1


def test_departamentos_son_independientes(presencia):
    presencia.mark_online("Cocina")
    presencia.mark_online("Seguridad")
    presencia.mark_offline("Cocina")

    assert presencia.departamentos_online() == ["Seguridad"]
