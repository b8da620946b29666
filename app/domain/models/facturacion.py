from sqlalchemy import Column, Integer, String, DateTime, Float, Text, ForeignKey
from app.config.database import Base
from app.utils.fechas import ahora


class Facturacion(Base):
    __tablename__ = "facturacion"

    id = Column(Integer, primary_key=True, autoincrement=True)
    idCliente = Column(Integer, ForeignKey("clientes.id"), nullable=False, index=True)
    idSubasta = Column(Integer, ForeignKey("subastas.id"), nullable=True, index=True)

    monto = Column(Float, nullable=False)
    banco = Column(String(100), nullable=False)
    numCuentaDeposito = Column(String(50), nullable=False)
    docAdjunto = Column(String(500), nullable=True)
    concepto = Column(String(255), nullable=False)
    comentarios = Column(Text, nullable=True)

    # Sin columna de estado: el ciclo de vida se deduce de validatedAt / revokedAt
    createdAt = Column(DateTime, nullable=False, default=ahora)
    updatedAt = Column(DateTime, nullable=True)
    validatedAt = Column(DateTime, nullable=True)
    revokedAt = Column(DateTime, nullable=True)
