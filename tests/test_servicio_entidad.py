from datetime import datetime, timedelta

import pytest

from app.application.definiciones import CLIENTE, FACTURACION, GARANTIA, SUBASTA, USUARIO
from app.application.reenviar_garantia import ReenviarGarantia
from app.application.servicio_entidad import ServicioEntidad
from app.domain.esquemas import (
    ClienteActualizacion,
    ClienteCrear,
    FacturacionCrear,
    GarantiaCrear,
    GarantiaReenvio,
)
from app.domain.resultado import Err, Ok, TipoError

MOMENTO = datetime(2025, 5, 1, 12, 0, 0)


class FakeRepo:
    def __init__(self, registros=None, campo_unico=None, campo_cliente=None):
        self.registros = {r["id"]: dict(r) for r in (registros or [])}
        self.campo_unico = campo_unico
        self.campo_cliente = campo_cliente
        self.lecturas = 0
        self.escrituras = 0

    def listar(self):
        return [dict(r) for r in self.registros.values()]

    def obtener(self, id_registro):
        self.lecturas += 1
        registro = self.registros.get(id_registro)
        return dict(registro) if registro else None

    def existe(self, id_registro):
        return id_registro in self.registros

    def buscar_por_unico(self, valor, excluir_id=None):
        for registro in self.registros.values():
            if registro.get(self.campo_unico) == valor and registro["id"] != excluir_id:
                return dict(registro)
        return None

    def listar_por_cliente(self, id_cliente):
        return [dict(r) for r in self.registros.values() if r.get(self.campo_cliente) == id_cliente]

    def crear(self, campos):
        self.escrituras += 1
        nuevo_id = max(self.registros, default=0) + 1
        self.registros[nuevo_id] = {"id": nuevo_id, "updatedAt": None, **campos}
        return dict(self.registros[nuevo_id])

    def actualizar(self, id_registro, campos):
        if id_registro not in self.registros:
            return None
        self.escrituras += 1
        self.registros[id_registro].update(campos)
        return dict(self.registros[id_registro])

    def eliminar(self, id_registro):
        self.escrituras += 1
        return self.registros.pop(id_registro, None) is not None


class Reloj:
    """Devuelve un instante distinto en cada llamada."""

    def __init__(self, inicio=MOMENTO):
        self.actual = inicio

    def __call__(self):
        momento = self.actual
        self.actual = self.actual + timedelta(seconds=1)
        return momento


DATOS_CLIENTE = {
    "correo": "ana@correo.com",
    "nombreCompleto": "Ana Torres",
    "tipDocumento": "DNI",
    "numDocumento": "44556677",
    "numCelular": "987654321",
}


@pytest.fixture
def repo_clientes():
    return FakeRepo(
        [
            dict(DATOS_CLIENTE, id=1, activo=True, saldoTotalDolar=0.0),
            dict(DATOS_CLIENTE, id=2, correo="luis@correo.com", activo=True, saldoTotalDolar=10.0),
        ],
        campo_unico="correo",
    )


def test_obtener_con_id_no_numerico_no_consulta_repo(repo_clientes):
    servicio = ServicioEntidad(CLIENTE, repo_clientes)
    resultado = servicio.obtener("abc")
    assert resultado == Err(TipoError.ARGUMENTO_INVALIDO, "El ID del cliente debe ser un número válido")
    assert repo_clientes.lecturas == 0


def test_obtener_inexistente(repo_clientes):
    resultado = ServicioEntidad(CLIENTE, repo_clientes).obtener("99")
    assert resultado == Err(TipoError.NO_ENCONTRADO, "Cliente con ID 99 no encontrado")


def test_obtener_por_correo(repo_clientes):
    servicio = ServicioEntidad(CLIENTE, repo_clientes)
    assert servicio.obtener_por_unico("luis@correo.com").valor["id"] == 2
    assert servicio.obtener_por_unico("x@correo.com").tipo == TipoError.NO_ENCONTRADO


def test_crear_cliente_con_valores_por_defecto():
    repo = FakeRepo(campo_unico="correo")
    resultado = ServicioEntidad(CLIENTE, repo, reloj=lambda: MOMENTO).crear(ClienteCrear(**DATOS_CLIENTE))
    assert isinstance(resultado, Ok)
    assert resultado.valor["activo"] is True
    assert resultado.valor["saldoTotalDolar"] == 0.0
    assert resultado.valor["createdAt"] == MOMENTO


def test_crear_cliente_con_correo_duplicado(repo_clientes):
    resultado = ServicioEntidad(CLIENTE, repo_clientes).crear(ClienteCrear(**DATOS_CLIENTE))
    assert resultado == Err(TipoError.CONFLICTO, "Ya existe un cliente con ese correo")
    assert repo_clientes.escrituras == 0


def test_crear_garantia_con_cliente_inexistente(repo_clientes):
    repo = FakeRepo(campo_cliente="idCliente")
    subastas = FakeRepo([{"id": 1, "estado": "ABIERTO"}])
    servicio = ServicioEntidad(GARANTIA, repo, referencias={"cliente": repo_clientes, "subasta": subastas})
    resultado = servicio.crear(GarantiaCrear(
        idCliente=7,
        idSubasta=1,
        concepto="Garantía",
        fechaSubasta="2025-03-10",
        fechaExpiracion="2025-04-10",
        tipo="DEPOSITO",
        moneda="USD",
        montoGarantia=500,
        banco="BCP",
        numCuentaDeposito="123",
        docAdjunto="voucher.pdf",
    ))
    assert resultado == Err(TipoError.NO_ENCONTRADO, "Cliente con ID 7 no encontrado")
    assert repo.escrituras == 0


def test_crear_facturacion_con_subasta_inexistente(repo_clientes):
    repo = FakeRepo(campo_cliente="idCliente")
    servicio = ServicioEntidad(FACTURACION, repo, referencias={"cliente": repo_clientes, "subasta": FakeRepo()})
    resultado = servicio.crear(FacturacionCrear(
        idCliente=1,
        idSubasta=3,
        monto=100,
        banco="BCP",
        numCuentaDeposito="123",
        concepto="Comisión",
    ))
    assert resultado == Err(TipoError.NO_ENCONTRADO, "Subasta con ID 3 no encontrada")


def test_actualizacion_parcial(repo_clientes):
    servicio = ServicioEntidad(CLIENTE, repo_clientes, reloj=lambda: MOMENTO)
    resultado = servicio.actualizar("1", ClienteActualizacion(numCelular="911222333"))
    assert resultado.valor["numCelular"] == "911222333"
    assert resultado.valor["nombreCompleto"] == "Ana Torres"
    assert resultado.valor["updatedAt"] == MOMENTO


def test_actualizar_correo_en_uso_por_otro_cliente(repo_clientes):
    servicio = ServicioEntidad(CLIENTE, repo_clientes)
    resultado = servicio.actualizar(1, ClienteActualizacion(correo="luis@correo.com"))
    assert resultado == Err(TipoError.CONFLICTO, "Ya existe otro cliente con ese correo")
    # Su propio correo no es conflicto
    assert isinstance(servicio.actualizar(1, ClienteActualizacion(correo="ana@correo.com")), Ok)


def test_transicion_no_soportada():
    servicio = ServicioEntidad(GARANTIA, FakeRepo([{"id": 1, "estado": "PV"}]))
    resultado = servicio.transicionar(1, "close")
    assert resultado.tipo == TipoError.ARGUMENTO_INVALIDO


def test_validar_facturacion_dos_veces_sobrescribe_fecha():
    repo = FakeRepo([{"id": 1, "validatedAt": None, "revokedAt": None}])
    servicio = ServicioEntidad(FACTURACION, repo, reloj=Reloj())
    primera = servicio.transicionar(1, "validate")
    segunda = servicio.transicionar(1, "validate")
    assert isinstance(primera, Ok) and isinstance(segunda, Ok)
    assert segunda.valor["validatedAt"] > primera.valor["validatedAt"]


def test_modo_estricto_no_modifica_registro():
    repo = FakeRepo([{"id": 1, "estado": "R", "validatedAt": None}])
    servicio = ServicioEntidad(GARANTIA, repo, estricto=True)
    resultado = servicio.transicionar(1, "validate")
    assert resultado.tipo == TipoError.ESTADO_INVALIDO
    assert repo.registros[1]["estado"] == "R"
    assert repo.escrituras == 0


def test_eliminar_usuario_es_borrado_fisico():
    repo = FakeRepo([{"id": 1, "email": "a@b.com"}], campo_unico="email")
    resultado = ServicioEntidad(USUARIO, repo).eliminar("1")
    assert resultado == Ok(None)
    assert repo.registros == {}


def test_eliminar_subasta_es_cancelacion():
    repo = FakeRepo([{"id": 1, "estado": "ABIERTO", "canceledAt": None}])
    resultado = ServicioEntidad(SUBASTA, repo, reloj=lambda: MOMENTO).eliminar(1)
    assert resultado.valor["estado"] == "CANCELADA"
    assert resultado.valor["canceledAt"] == MOMENTO
    assert 1 in repo.registros


def test_listar_por_cliente_valida_id():
    repo = FakeRepo([{"id": 1, "idCliente": 4}, {"id": 2, "idCliente": 5}], campo_cliente="idCliente")
    servicio = ServicioEntidad(GARANTIA, repo)
    assert [g["id"] for g in servicio.listar_por_cliente("4").valor] == [1]
    assert servicio.listar_por_cliente("x").tipo == TipoError.ARGUMENTO_INVALIDO


def test_reenviar_garantia_vuelve_a_pendiente():
    repo = FakeRepo([{"id": 1, "estado": "I", "banco": "BCP", "concepto": "Garantía"}])
    servicio = ServicioEntidad(GARANTIA, repo, reloj=lambda: MOMENTO)
    entrada = GarantiaReenvio.model_validate({"banco": "BBVA", "concepto": "otro"})
    resultado = ReenviarGarantia(servicio).execute("1", entrada)
    assert resultado.valor["estado"] == "PV"
    assert resultado.valor["banco"] == "BBVA"
    assert resultado.valor["concepto"] == "Garantía"
