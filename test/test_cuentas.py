import unittest

from core.application.ajustes import AjustesService
from core.application.autenticar import LoginCommand, LoginUseCase
from core.application.suscribir import SuscribirCommand, SuscribirUseCase
from core.application.usuarios import (
    CambiarPasswordCommand,
    CambiarPasswordUseCase,
    CrearUsuarioCommand,
    CrearUsuarioUseCase,
    sembrar_admin,
)
from core.domain.errors import (
    CredencialesInvalidasError,
    DepartamentoInvalidoError,
    UsuarioExistenteError,
    UsuarioNoEncontradoError,
)
from infrastructure.seguridad.jwt_tokens import JwtTokenService
from infrastructure.seguridad.passwords import WerkzeugPasswordHasher
from fakes import (
    InMemoryAjustesRepository,
    InMemorySuscripcionRepository,
    InMemoryUsuarioRepository,
    PlainPasswordHasher,
)

SECRET = "clave-de-pruebas-suficientemente-larga-0123"


class CuentasTests(unittest.TestCase):
    def setUp(self) -> None:
        self.usuarios = InMemoryUsuarioRepository()
        self.hasher = PlainPasswordHasher()
        self.tokens = JwtTokenService(secret=SECRET, expire_minutes=5)
        CrearUsuarioUseCase(self.usuarios, self.hasher).execute(
            CrearUsuarioCommand("recepcion", "clave123", "staff", "Recepcion")
        )

    def test_login_correcto_emite_token(self) -> None:
        sesion = LoginUseCase(self.usuarios, self.hasher, self.tokens).execute(
            LoginCommand("recepcion", "clave123")
        )

        claims = self.tokens.verificar(sesion.token)
        self.assertEqual(claims["sub"], "recepcion")
        self.assertEqual(claims["departamento"], "Recepcion")
        self.assertEqual(sesion.usuario.rol, "staff")

    def test_login_password_incorrecto(self) -> None:
        with self.assertRaises(CredencialesInvalidasError):
            LoginUseCase(self.usuarios, self.hasher, self.tokens).execute(
                LoginCommand("recepcion", "otra")
            )

    def test_login_usuario_inexistente(self) -> None:
        with self.assertRaises(CredencialesInvalidasError):
            LoginUseCase(self.usuarios, self.hasher, self.tokens).execute(
                LoginCommand("nadie", "x")
            )

    def test_password_no_se_guarda_en_claro(self) -> None:
        self.assertNotEqual(self.usuarios.get("recepcion").password_hash, "clave123")

    def test_crear_usuario_duplicado(self) -> None:
        with self.assertRaises(UsuarioExistenteError):
            CrearUsuarioUseCase(self.usuarios, self.hasher).execute(
                CrearUsuarioCommand("recepcion", "x", "staff", "Recepcion")
            )

    def test_crear_usuario_con_departamento_invalido(self) -> None:
        with self.assertRaises(DepartamentoInvalidoError):
            CrearUsuarioUseCase(self.usuarios, self.hasher).execute(
                CrearUsuarioCommand("pepe", "x", "staff", "Piscina")
            )

    def test_cambiar_password(self) -> None:
        CambiarPasswordUseCase(self.usuarios, self.hasher).execute(
            CambiarPasswordCommand("recepcion", "nueva")
        )

        self.assertTrue(self.hasher.verify(self.usuarios.get("recepcion").password_hash, "nueva"))

    def test_cambiar_password_usuario_inexistente(self) -> None:
        with self.assertRaises(UsuarioNoEncontradoError):
            CambiarPasswordUseCase(self.usuarios, self.hasher).execute(
                CambiarPasswordCommand("nadie", "nueva")
            )

    def test_sembrar_admin_una_sola_vez(self) -> None:
        self.assertTrue(sembrar_admin(self.usuarios, self.hasher, "1234"))
        self.assertFalse(sembrar_admin(self.usuarios, self.hasher, "otra"))

        admin = self.usuarios.get("sistemas")
        self.assertTrue(admin.es_admin)
        self.assertTrue(self.hasher.verify(admin.password_hash, "1234"))


class SeguridadTests(unittest.TestCase):
    def test_werkzeug_hash_y_verificacion(self) -> None:
        hasher = WerkzeugPasswordHasher()
        password_hash = hasher.hash("1234")

        self.assertNotEqual(password_hash, "1234")
        self.assertTrue(hasher.verify(password_hash, "1234"))
        self.assertFalse(hasher.verify(password_hash, "12345"))

    def test_token_con_otra_clave_es_invalido(self) -> None:
        usuarios = InMemoryUsuarioRepository()
        usuario = CrearUsuarioUseCase(usuarios, PlainPasswordHasher()).execute(
            CrearUsuarioCommand("ana", "x", "staff", "Cocina")
        )
        token = JwtTokenService(secret=SECRET).emitir(usuario)

        self.assertIsNone(JwtTokenService(secret=SECRET + "-otra").verificar(token))
        self.assertIsNone(JwtTokenService(secret=SECRET).verificar("no-es-un-token"))

    def test_token_expirado(self) -> None:
        usuarios = InMemoryUsuarioRepository()
        usuario = CrearUsuarioUseCase(usuarios, PlainPasswordHasher()).execute(
            CrearUsuarioCommand("ana", "x", "staff", "Cocina")
        )
        token = JwtTokenService(secret=SECRET, expire_minutes=-1).emitir(usuario)

        self.assertIsNone(JwtTokenService(secret=SECRET).verificar(token))


class SuscripcionesYAjustesTests(unittest.TestCase):
    def test_suscribir_sin_departamento_usa_general(self) -> None:
        repo = InMemorySuscripcionRepository()

        SuscribirUseCase(repo).execute(
            SuscribirCommand(endpoint="https://push/1", datos={"keys": {"auth": "a"}})
        )

        [s] = repo.list_por_departamento("general")
        self.assertEqual(s.datos, {"keys": {"auth": "a"}, "endpoint": "https://push/1"})

    def test_suscribir_sin_endpoint(self) -> None:
        with self.assertRaises(ValueError):
            SuscribirUseCase(InMemorySuscripcionRepository()).execute(SuscribirCommand(endpoint=""))

    def test_ajustes_load_save(self) -> None:
        service = AjustesService(InMemoryAjustesRepository())

        self.assertIsNone(service.load().logo)
        service.save({"logo": "logo.png"})
        ajustes = service.save({"nombre_hotel": "Molly"})

        self.assertEqual(ajustes.logo, "logo.png")
        self.assertEqual(service.load().nombre_hotel, "Molly")

    def test_ajustes_clave_desconocida(self) -> None:
        with self.assertRaises(ValueError):
            AjustesService(InMemoryAjustesRepository()).save({"tema": "oscuro"})


if __name__ == "__main__":
    unittest.main()
