"""
Modelo de Cliente
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Float
from sqlalchemy.sql import func
from .database import Base


class Cliente(Base):
    """
    Modelo de Cliente - Punto de entrega con geolocalización opcional
    NOTA: Los clientes no participan en la relación camiones-días
    """

    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, index=True)
    codigo_alternativo = Column(String(50), unique=True, nullable=True, index=True)
    nombre = Column(String(100), nullable=False, index=True)
    razon = Column(String(100), nullable=True)
    direccion = Column(String(200), nullable=True)
    telefono = Column(String(30), nullable=True)
    rut = Column(String(30), nullable=True)
    activo = Column(Boolean, default=True, nullable=False, index=True)

    # Coordenadas: x = longitud, y = latitud
    x = Column(Float, nullable=True)
    y = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Cliente(id={self.id}, nombre={self.nombre}, activo={self.activo})>"
