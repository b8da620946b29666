from fastapi.testclient import TestClient

from app.interfaces.clientes_controller import get_servicio
from app.domain.resultado import Ok
from main import app


def test_raiz_y_health(client):
    assert client.get("/").status_code == 200
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_json_mal_formado_devuelve_400(client):
    response = client.post(
        "/api/clientes",
        content="{no es json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "El cuerpo de la petición no es válido"}


def test_ruta_desconocida_usa_sobre(client):
    response = client.get("/api/no-existe")
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_error_inesperado_devuelve_500(client):
    class FakeServicio:
        def listar(self):
            raise RuntimeError("base de datos caída")

    app.dependency_overrides[get_servicio] = lambda: FakeServicio()
    response = client.get("/api/clientes")
    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Error al obtener clientes",
        "error": "base de datos caída",
    }


def test_servicio_sustituido(client):
    class FakeServicio:
        def listar(self):
            return Ok([{"id": 1, "correo": "a@b.com"}])

    app.dependency_overrides[get_servicio] = lambda: FakeServicio()
    response = client.get("/api/clientes")
    assert response.status_code == 200
    assert response.json()["data"][0]["correo"] == "a@b.com"


def test_arranque_crea_tablas(monkeypatch):
    llamadas = []
    monkeypatch.setattr("main.init_db", lambda metadata: llamadas.append(metadata))
    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
    assert len(llamadas) == 1


def test_arranque_continua_si_falla_la_bd(monkeypatch, caplog):
    def init_db_caido(metadata):
        raise RuntimeError("sin conexión")

    monkeypatch.setattr("main.init_db", init_db_caido)
    with TestClient(app) as client:
        assert client.get("/").status_code == 200
    assert "No se pudieron crear las tablas" in caplog.text
