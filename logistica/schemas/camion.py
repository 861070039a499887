"""
Schemas de Camión
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime

from .common import EntityId


class CamionCreate(BaseModel):
    """Schema para crear o reemplazar camión (POST / PUT)"""
    descripcion: str = Field(..., min_length=1, max_length=255, description="Descripción del camión")

    class Config:
        str_strip_whitespace = True
        json_schema_extra = {
            "example": {
                "descripcion": "Daniel Torres"
            }
        }


class CamionUpdate(BaseModel):
    """Schema para actualizar camión (PATCH)"""
    descripcion: str = Field(None, min_length=1, max_length=255)

    class Config:
        str_strip_whitespace = True


class AsignarDiasRequest(BaseModel):
    """Reemplaza todos los días del camión; una lista vacía los quita todos"""
    diasIds: List[EntityId] = Field(..., description="IDs de días de entrega")

    @field_validator("diasIds")
    @classmethod
    def sin_duplicados(cls, v):
        return list(dict.fromkeys(v))

    class Config:
        json_schema_extra = {
            "example": {
                "diasIds": [1, 2, 3]
            }
        }


class CamionResponse(BaseModel):
    """Schema para respuesta de camión"""
    id: int = Field(..., description="ID del camión")
    descripcion: str = Field(..., description="Descripción del camión")
    created_at: Optional[datetime] = Field(None, description="Fecha de creación")
    updated_at: Optional[datetime] = Field(None, description="Última actualización")

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "descripcion": "Daniel Torres",
                "created_at": "2025-10-02T00:00:00Z",
                "updated_at": "2025-10-02T00:00:00Z"
            }
        }


class AsignadoResponse(BaseModel):
    """Contraparte asignada (día o camión) en los listados agregados"""
    id: int
    descripcion: str

    class Config:
        from_attributes = True


class CamionConDiasResponse(CamionResponse):
    """Schema de camión con sus días de entrega asignados"""
    dias_asignados: List[AsignadoResponse] = Field(default_factory=list)
