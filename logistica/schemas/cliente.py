"""
Schemas de Cliente
"""
from pydantic import AliasChoices, BaseModel, Field, StrictBool, field_validator, model_validator
from typing import Optional
from datetime import datetime

CODIGO_ALIASES = ("codigoAlternativo", "codigo_alternativo")


class ClienteBase(BaseModel):
    """Campos editables de cliente"""
    codigo_alternativo: Optional[str] = Field(
        None,
        max_length=50,
        validation_alias=AliasChoices(*CODIGO_ALIASES),
        description="Código externo único",
    )
    nombre: str = Field(..., min_length=1, max_length=100, description="Nombre del cliente")
    razon: Optional[str] = Field(None, max_length=100, description="Razón social")
    direccion: Optional[str] = Field(None, max_length=200, description="Dirección")
    telefono: Optional[str] = Field(None, max_length=30, description="Teléfono")
    rut: Optional[str] = Field(None, max_length=30, description="RUT")
    activo: Optional[StrictBool] = Field(None, description="Estado activo (por defecto true)")
    x: Optional[float] = Field(None, ge=-180, le=180, allow_inf_nan=False, description="Longitud")
    y: Optional[float] = Field(None, ge=-90, le=90, allow_inf_nan=False, description="Latitud")

    class Config:
        str_strip_whitespace = True

    @model_validator(mode="before")
    @classmethod
    def un_solo_codigo(cls, data):
        """Las dos grafías del código se aceptan, pero no con valores distintos"""
        if isinstance(data, dict) and all(key in data for key in CODIGO_ALIASES):
            if data[CODIGO_ALIASES[0]] != data[CODIGO_ALIASES[1]]:
                raise ValueError("El código alternativo se envió con dos valores distintos")
        return data

    @field_validator("codigo_alternativo", mode="before")
    @classmethod
    def codigo_numerico_como_texto(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("x", "y", mode="before")
    @classmethod
    def coordenada_vacia(cls, v):
        if isinstance(v, bool):
            raise ValueError("coordenada booleana")
        if v == "":
            return None
        return v


class ClienteCreate(ClienteBase):
    """Schema para crear o reemplazar cliente (POST / PUT)"""

    class Config:
        str_strip_whitespace = True
        json_schema_extra = {
            "example": {
                "codigoAlternativo": "C-0001",
                "nombre": "Almacén Don Pedro",
                "razon": "Pedro Gómez S.A.",
                "direccion": "Av. Italia 1234",
                "telefono": "099123456",
                "rut": "211234560018",
                "activo": True,
                "x": -56.1645,
                "y": -34.9011
            }
        }


class ClienteUpdate(ClienteBase):
    """Schema para actualizar cliente (PATCH): solo se aplican los campos enviados"""
    nombre: str = Field(None, min_length=1, max_length=100)
    activo: StrictBool = Field(None, description="true | false; null no se acepta")


class ClienteResponse(BaseModel):
    """Schema para respuesta de cliente"""
    id: int = Field(..., description="ID del cliente")
    codigo_alternativo: Optional[str] = Field(
        None, serialization_alias="codigoAlternativo", description="Código externo único"
    )
    nombre: str = Field(..., description="Nombre del cliente")
    razon: Optional[str] = Field(None, description="Razón social")
    direccion: Optional[str] = Field(None, description="Dirección")
    telefono: Optional[str] = Field(None, description="Teléfono")
    rut: Optional[str] = Field(None, description="RUT")
    activo: bool = Field(True, description="Estado activo")
    x: Optional[float] = Field(None, description="Longitud")
    y: Optional[float] = Field(None, description="Latitud")
    created_at: Optional[datetime] = Field(None, description="Fecha de creación")
    updated_at: Optional[datetime] = Field(None, description="Última actualización")

    class Config:
        from_attributes = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "codigoAlternativo": "C-0001",
                "nombre": "Almacén Don Pedro",
                "razon": "Pedro Gómez S.A.",
                "direccion": "Av. Italia 1234",
                "telefono": "099123456",
                "rut": "211234560018",
                "activo": True,
                "x": -56.1645,
                "y": -34.9011,
                "created_at": "2025-10-02T00:00:00Z",
                "updated_at": "2025-10-02T00:00:00Z"
            }
        }


class UbicacionResponse(BaseModel):
    """Schema de la ubicación de un cliente"""
    id: int
    nombre: str
    x: float = Field(..., description="Longitud")
    y: float = Field(..., description="Latitud")
