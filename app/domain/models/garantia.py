from sqlalchemy import Column, Integer, String, DateTime, Float, Text, ForeignKey
from app.config.database import Base
from app.utils.fechas import ahora


class Garantia(Base):
    __tablename__ = "garantias"

    id = Column(Integer, primary_key=True, autoincrement=True)
    idCliente = Column(Integer, ForeignKey("clientes.id"), nullable=False, index=True)
    idSubasta = Column(Integer, ForeignKey("subastas.id"), nullable=False, index=True)

    concepto = Column(String(255), nullable=False)
    fechaSubasta = Column(DateTime, nullable=False)
    fechaExpiracion = Column(DateTime, nullable=False)
    tipo = Column(String(50), nullable=False)
    moneda = Column(String(10), nullable=False)
    montoGarantia = Column(Float, nullable=False)
    montoPuja = Column(Float, nullable=True)
    porcentaje = Column(Float, nullable=True)

    # Depósito
    banco = Column(String(100), nullable=False)
    numCuentaDeposito = Column(String(50), nullable=False)
    docAdjunto = Column(String(500), nullable=True)
    comentarios = Column(Text, nullable=True)

    # estado: 'PV' | 'V' | 'I' | 'R' | 'E' | 'cancelada'
    estado = Column(String(20), nullable=False, default="PV")

    createdAt = Column(DateTime, nullable=False, default=ahora)
    updatedAt = Column(DateTime, nullable=True)
    validatedAt = Column(DateTime, nullable=True)
    invalidatedAt = Column(DateTime, nullable=True)
    revokedAt = Column(DateTime, nullable=True)
    paidAt = Column(DateTime, nullable=True)
    sentedAt = Column(DateTime, nullable=True)
    canceledAt = Column(DateTime, nullable=True)
