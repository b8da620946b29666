import pytest


@pytest.fixture
def facturacion(client, cliente, subasta):
    response = client.post("/api/facturacion", json={
        "idCliente": cliente["id"],
        "idSubasta": subasta["id"],
        "monto": "350.75",
        "banco": "BCP",
        "numCuentaDeposito": "191-0000000-0-01",
        "concepto": "Comisión de subasta",
    })
    assert response.status_code == 201
    return response.json()["data"]


def test_crear_facturacion(facturacion):
    assert facturacion["monto"] == 350.75
    assert facturacion["validatedAt"] is None
    assert facturacion["revokedAt"] is None


def test_crear_facturacion_con_cliente_inexistente(client):
    response = client.post("/api/facturacion", json={
        "idCliente": 77,
        "monto": 10,
        "banco": "BCP",
        "numCuentaDeposito": "1",
        "concepto": "Comisión",
    })
    assert response.status_code == 404
    assert response.json()["message"] == "Cliente con ID 77 no encontrado"
    assert client.get("/api/facturacion").json()["data"] == []


def test_validar_dos_veces(client, facturacion):
    primera = client.patch(f"/api/facturacion/{facturacion['id']}/validate")
    segunda = client.patch(f"/api/facturacion/{facturacion['id']}/validate")
    assert primera.status_code == 200
    assert segunda.status_code == 200
    assert segunda.json()["data"]["validatedAt"] >= primera.json()["data"]["validatedAt"]


def test_revocar_facturacion(client, facturacion):
    response = client.patch(f"/api/facturacion/{facturacion['id']}/revoke")
    assert response.status_code == 200
    assert response.json()["data"]["revokedAt"] is not None


def test_facturacion_no_tiene_borrado(client, facturacion):
    response = client.delete(f"/api/facturacion/{facturacion['id']}")
    assert response.status_code == 405
    assert response.json()["success"] is False


def test_listar_facturacion_por_cliente(client, facturacion, cliente):
    response = client.get(f"/api/facturacion/cliente/{cliente['id']}")
    assert [f["id"] for f in response.json()["data"]] == [facturacion["id"]]
