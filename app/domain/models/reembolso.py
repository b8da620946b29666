from sqlalchemy import Column, Integer, String, DateTime, Float, Text, ForeignKey
from app.config.database import Base
from app.utils.fechas import ahora


class Reembolso(Base):
    __tablename__ = "reembolsos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    idCliente = Column(Integer, ForeignKey("clientes.id"), nullable=False, index=True)

    monto = Column(Float, nullable=False)
    banco = Column(String(100), nullable=False)
    numCuentaDeposito = Column(String(50), nullable=False)
    docAdjunto = Column(String(500), nullable=True)
    comentarios = Column(Text, nullable=True)

    # estado: 'P' (pendiente) | 'A' (aprobado) | 'R' (revocado)
    estado = Column(String(5), nullable=False, default="P")

    createdAt = Column(DateTime, nullable=False, default=ahora)
    updatedAt = Column(DateTime, nullable=True)
    validatedAt = Column(DateTime, nullable=True)
    revokedAt = Column(DateTime, nullable=True)
