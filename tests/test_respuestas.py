import json
from datetime import datetime

from app.domain.resultado import Err, Ok, TipoError
from app.utils.error_handlers import ejecutar_operacion
from app.utils.respuestas import construir_sobre


def _cuerpo(response):
    return json.loads(response.body)


def test_sobre_de_exito_sin_error():
    sobre = construir_sobre(True, "ok", data={"id": 1, "createdAt": datetime(2025, 1, 2, 3, 4, 5)})
    assert sobre == {
        "success": True,
        "message": "ok",
        "data": {"id": 1, "createdAt": "2025-01-02T03:04:05"},
    }


def test_sobre_sin_data_ni_error():
    assert construir_sobre(True, "Usuario eliminado correctamente") == {
        "success": True,
        "message": "Usuario eliminado correctamente",
    }


def test_sobre_de_error():
    assert construir_sobre(False, "Error al crear cliente", error="boom") == {
        "success": False,
        "message": "Error al crear cliente",
        "error": "boom",
    }


def test_ejecutar_operacion_exito_con_status():
    response = ejecutar_operacion(
        lambda: Ok({"id": 3}),
        mensaje_exito="Creado",
        mensaje_error="Error",
        status_exito=201,
    )
    assert response.status_code == 201
    assert _cuerpo(response) == {"success": True, "message": "Creado", "data": {"id": 3}}


def test_ejecutar_operacion_mensaje_calculado():
    response = ejecutar_operacion(
        lambda: Ok({"activo": False}),
        mensaje_exito=lambda valor: "activo" if valor["activo"] else "inactivo",
        mensaje_error="Error",
    )
    assert _cuerpo(response)["message"] == "inactivo"


def test_ejecutar_operacion_mapea_errores():
    casos = [
        (TipoError.ARGUMENTO_INVALIDO, 400),
        (TipoError.NO_ENCONTRADO, 404),
        (TipoError.CONFLICTO, 409),
        (TipoError.ESTADO_INVALIDO, 409),
        (TipoError.INTERNO, 500),
    ]
    for tipo, codigo in casos:
        response = ejecutar_operacion(lambda: Err(tipo, "fallo"), mensaje_exito="ok", mensaje_error="Error")
        assert response.status_code == codigo
        assert _cuerpo(response) == {"success": False, "message": "fallo"}


def test_ejecutar_operacion_excepcion_devuelve_500():
    def operacion():
        raise RuntimeError("conexión perdida")

    response = ejecutar_operacion(operacion, mensaje_exito="ok", mensaje_error="Error al obtener clientes")
    assert response.status_code == 500
    assert _cuerpo(response) == {
        "success": False,
        "message": "Error al obtener clientes",
        "error": "conexión perdida",
    }
