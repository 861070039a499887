"""
Modelo de Camión
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from .database import Base


class Camion(Base):
    """Modelo de Camión - Vehículo de reparto"""

    __tablename__ = "camiones"

    id = Column(Integer, primary_key=True, index=True)
    descripcion = Column(String(255), unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Camion(id={self.id}, descripcion={self.descripcion})>"
