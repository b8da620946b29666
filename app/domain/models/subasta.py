from sqlalchemy import Column, Integer, String, DateTime, Float, Text
from app.config.database import Base
from app.utils.fechas import ahora


class Subasta(Base):
    __tablename__ = "subastas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    titulo = Column(String(255), nullable=False)
    imgSubasta = Column(String(500), nullable=True)
    placaVehiculo = Column(String(20), nullable=False)
    empresa = Column(String(255), nullable=False)
    fecha = Column(DateTime, nullable=False)
    moneda = Column(String(10), nullable=False)
    monto = Column(Float, nullable=False)
    descripcion = Column(Text, nullable=True)
    # estado: 'ABIERTO' | 'CERRADA' | 'CANCELADA'
    estado = Column(String(20), nullable=False, default="ABIERTO")

    createdAt = Column(DateTime, nullable=False, default=ahora)
    updatedAt = Column(DateTime, nullable=True)
    closedAt = Column(DateTime, nullable=True)
    canceledAt = Column(DateTime, nullable=True)
