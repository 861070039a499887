"""
Modelo de Asignación Camión-Día
Tabla intermedia N:M entre Camiones y Días de Entrega
"""
from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func
from .database import Base


class CamionDia(Base):
    """
    Modelo de Asignación - Relaciona camiones con días de entrega
    Esta es la ÚNICA fuente de verdad para la relación camión-día.
    Las FKs no tienen cascada: un camión o día con asignaciones
    no puede eliminarse hasta liberar sus asignaciones.
    """

    __tablename__ = "camiones_dias"
    __table_args__ = (
        UniqueConstraint("camion_id", "dia_entrega_id", name="uq_camiones_dias_par"),
    )

    id = Column(Integer, primary_key=True, index=True)
    camion_id = Column(Integer, ForeignKey("camiones.id"), nullable=False, index=True)
    dia_entrega_id = Column(Integer, ForeignKey("dias_entrega.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<CamionDia(id={self.id}, camion={self.camion_id}, dia={self.dia_entrega_id})>"
