"""
Schemas de Día de Entrega
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime

from .camion import AsignadoResponse
from .common import EntityId


class DiaEntregaCreate(BaseModel):
    """Schema para crear o reemplazar día de entrega (POST / PUT)"""
    descripcion: str = Field(..., min_length=1, max_length=100, description="Descripción (Lunes, Martes, ...)")

    class Config:
        str_strip_whitespace = True
        json_schema_extra = {
            "example": {
                "descripcion": "Lunes"
            }
        }


class DiaEntregaUpdate(BaseModel):
    """Schema para actualizar día de entrega (PATCH)"""
    descripcion: str = Field(None, min_length=1, max_length=100)

    class Config:
        str_strip_whitespace = True


class AsignarCamionesRequest(BaseModel):
    """Reemplaza todos los camiones del día"""
    camionesIds: List[EntityId] = Field(..., description="IDs de camiones")

    @field_validator("camionesIds")
    @classmethod
    def sin_duplicados(cls, v):
        return list(dict.fromkeys(v))


class DiaEntregaResponse(BaseModel):
    """Schema para respuesta de día de entrega"""
    id: int = Field(..., description="ID del día de entrega")
    descripcion: str = Field(..., description="Descripción (Lunes, Martes, ...)")
    created_at: Optional[datetime] = Field(None, description="Fecha de creación")
    updated_at: Optional[datetime] = Field(None, description="Última actualización")

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "descripcion": "Lunes",
                "created_at": "2025-10-02T00:00:00Z",
                "updated_at": "2025-10-02T00:00:00Z"
            }
        }


class DiaEntregaConCamionesResponse(DiaEntregaResponse):
    """Schema de día de entrega con sus camiones asignados"""
    camiones_asignados: List[AsignadoResponse] = Field(default_factory=list)
