"""
Modelo de Día de Entrega
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from .database import Base


class DiaEntrega(Base):
    """Modelo de Día de Entrega (Lunes, Martes, ...)"""

    __tablename__ = "dias_entrega"

    id = Column(Integer, primary_key=True, index=True)
    descripcion = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<DiaEntrega(id={self.id}, descripcion={self.descripcion})>"
