from sqlalchemy import Column, Integer, String, DateTime, Boolean
from app.config.database import Base
from app.utils.fechas import ahora


class Usuario(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    nombre = Column(String(150), nullable=False)
    telefono = Column(String(30), nullable=True)
    tipo_usuario = Column(String(30), nullable=False)
    esta_activo = Column(Boolean, nullable=False, default=True)

    createdAt = Column(DateTime, nullable=False, default=ahora)
    updatedAt = Column(DateTime, nullable=True)
