import threading

import pytest

from core.application.notificar_departamento import NotificarDepartamentoUseCase
from infrastructure.notificaciones.pool import PoolNotificaciones
from infrastructure.realtime.presencia import InMemoryPresencia
from fakes import (
    FakeDespachador,
    FakePushProvider,
    InMemorySuscripcionRepository,
    suscripcion,
)


class DespachadorBloqueado(FakeDespachador):
    def __init__(self) -> None:
        super().__init__()
        self.liberar = threading.Event()
        self.iniciado = threading.Event()

    def entregar(self, departamento, titulo, mensaje, tarea_id=None) -> None:
        self.iniciado.set()
        self.liberar.wait(timeout=5)


class DespachadorRoto(FakeDespachador):
    def entregar(self, departamento, titulo, mensaje, tarea_id=None) -> None:
        raise RuntimeError("boom")


@pytest.fixture
def pools():
    creados = []

    def _crear(despachador, **kwargs):
        pool = PoolNotificaciones(despachador, **kwargs)
        creados.append(pool)
        return pool

    yield _crear
    for pool in creados:
        pool.shutdown(wait=True)


def test_entrega_en_segundo_plano(pools):
    destino = FakeDespachador()
    pool = pools(destino)

    pool.notify("Cocina", "Nueva tarea", "Limpiar campana", 4)

    assert pool.esperar(timeout=5) is True
    assert destino.entregas == [("Cocina", "Nueva tarea", "Limpiar campana", 4)]
    assert pool.enviadas == 1
    assert pool.completadas == 1
    assert pool.pendientes == 0


def test_departamento_online_no_encola(pools):
    destino = FakeDespachador(online={"Cocina"})
    pool = pools(destino)

    pool.notify("Cocina", "Nueva tarea", "Limpiar campana", 4)

    assert pool.esperar(timeout=5) is True
    assert destino.entregas == []
    assert pool.enviadas == 0
    assert pool.solo_realtime == 1


def test_rechaza_cuando_esta_lleno(pools):
    destino = DespachadorBloqueado()
    pool = pools(destino, max_workers=1, max_pendientes=1)

    pool.notify("Cocina", "t", "m")
    assert destino.iniciado.wait(timeout=5)
    pool.notify("Cocina", "t", "m")

    assert pool.rechazadas == 1
    assert pool.pendientes == 1

    destino.liberar.set()
    assert pool.esperar(timeout=5) is True
    assert pool.completadas == 1


def test_fallos_quedan_contados(pools):
    pool = pools(DespachadorRoto())

    pool.notify("Cocina", "t", "m")

    assert pool.esperar(timeout=5) is True
    assert pool.fallidas == 1
    assert pool.completadas == 0


def test_despues_de_shutdown_rechaza(pools):
    pool = pools(FakeDespachador())
    pool.shutdown()

    pool.notify("Cocina", "t", "m")

    assert pool.rechazadas == 1


class TestPresenciaAlMomentoDelAviso:
    """La presencia que cuenta es la del momento del aviso, no la del worker."""

    @pytest.fixture
    def escenario(self, pools):
        presencia = InMemoryPresencia()
        suscripciones = InMemorySuscripcionRepository()
        suscripciones.save(suscripcion("https://push/m1", "Mantenimiento"))
        push = FakePushProvider()
        dispatcher = NotificarDepartamentoUseCase(presencia, suscripciones, push=push)
        # Un worker ocupado para que el aviso quede en cola.
        bloqueo = DespachadorBloqueado()
        pool = pools(dispatcher, max_workers=1)
        pool._executor.submit(bloqueo.entregar, "Cocina", "t", "m")
        assert bloqueo.iniciado.wait(timeout=5)
        return presencia, push, pool, bloqueo

    def test_online_al_avisar_y_offline_despues_no_envia(self, escenario):
        presencia, push, pool, bloqueo = escenario
        presencia.mark_online("Mantenimiento")

        pool.notify("Mantenimiento", "Estado actualizado", "Nuevo estado: cerrado", 5)
        presencia.mark_offline("Mantenimiento")
        bloqueo.liberar.set()

        assert pool.esperar(timeout=5) is True
        assert push.envios == []
        assert pool.solo_realtime == 1

    def test_offline_al_avisar_y_online_despues_si_envia(self, escenario):
        presencia, push, pool, bloqueo = escenario

        pool.notify("Mantenimiento", "Nueva tarea", "Fix AC - Mantenimiento", 5)
        presencia.mark_online("Mantenimiento")
        bloqueo.liberar.set()

        assert pool.esperar(timeout=5) is True
        assert [s["endpoint"] for s, _ in push.envios] == ["https://push/m1"]
