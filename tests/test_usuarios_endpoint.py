import pytest


@pytest.fixture
def usuario(client):
    response = client.post("/api/users", json={
        "email": "admin@subastas.pe",
        "nombre": "Administrador",
        "tipo_usuario": "admin",
    })
    assert response.status_code == 201
    return response.json()["data"]


def test_crear_usuario_activo(usuario):
    assert usuario["esta_activo"] is True
    assert usuario["telefono"] is None


def test_email_duplicado(client, usuario):
    response = client.post("/api/users", json={
        "email": usuario["email"],
        "nombre": "Otro",
        "tipo_usuario": "operador",
    })
    assert response.status_code == 409
    assert response.json()["message"] == "Ya existe un usuario con ese email"


def test_desactivar_usuario(client, usuario):
    response = client.put(f"/api/users/{usuario['id']}", json={"esta_activo": False})
    assert response.status_code == 200
    assert response.json()["data"]["esta_activo"] is False


def test_eliminar_usuario_es_borrado_fisico(client, usuario):
    response = client.delete(f"/api/users/{usuario['id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Usuario eliminado correctamente"}
    assert client.get(f"/api/users/{usuario['id']}").status_code == 404
    assert client.delete(f"/api/users/{usuario['id']}").status_code == 404
