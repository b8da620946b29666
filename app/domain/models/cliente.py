from sqlalchemy import Column, Integer, String, DateTime, Float, Boolean
from app.config.database import Base
from app.utils.fechas import ahora


class Cliente(Base):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    correo = Column(String(255), nullable=False, unique=True, index=True)
    nombreCompleto = Column(String(255), nullable=False)
    tipDocumento = Column(String(20), nullable=False)
    numDocumento = Column(String(50), nullable=False)
    numCelular = Column(String(30), nullable=False)
    saldoTotalDolar = Column(Float, nullable=False, default=0)

    # Datos de facturación (RUC / razón social)
    dtFacRuc = Column(String(20), nullable=True)
    dtFacRazonSocial = Column(String(255), nullable=True)

    activo = Column(Boolean, nullable=False, default=True)

    createdAt = Column(DateTime, nullable=False, default=ahora)
    updatedAt = Column(DateTime, nullable=True)
    canceledAt = Column(DateTime, nullable=True)
