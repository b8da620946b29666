import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from app.config.database import Base, get_db


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def datos_cliente():
    return {
        "correo": "ana@correo.com",
        "nombreCompleto": "Ana Torres",
        "tipDocumento": "DNI",
        "numDocumento": "44556677",
        "numCelular": "987654321",
    }


@pytest.fixture
def cliente(client, datos_cliente):
    response = client.post("/api/clientes", json=datos_cliente)
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def subasta(client):
    response = client.post("/api/subastas", json={
        "titulo": "Camioneta 4x4",
        "placaVehiculo": "XYZ-987",
        "empresa": "Autos SAC",
        "fecha": "2025-03-10",
        "moneda": "USD",
        "monto": 12000,
    })
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def datos_garantia(cliente, subasta):
    return {
        "idCliente": cliente["id"],
        "idSubasta": subasta["id"],
        "concepto": "Garantía de participación",
        "fechaSubasta": "2025-03-10",
        "fechaExpiracion": "2025-04-10",
        "tipo": "DEPOSITO",
        "moneda": "USD",
        "montoGarantia": 1200,
        "banco": "BCP",
        "numCuentaDeposito": "191-0000000-0-01",
        "docAdjunto": "voucher.pdf",
    }


@pytest.fixture
def garantia(client, datos_garantia):
    response = client.post("/api/garantias", json=datos_garantia)
    assert response.status_code == 201
    return response.json()["data"]
