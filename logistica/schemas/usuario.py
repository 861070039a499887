"""
Schemas de Usuario
"""
from pydantic import BaseModel, EmailStr, Field, StrictBool, field_validator
from typing import Dict, Literal, Optional
from datetime import datetime

Rol = Literal["user", "admin", "super_admin"]


class UsuarioCreate(BaseModel):
    """Schema para crear usuario"""
    email: EmailStr = Field(..., description="Email (se guarda en minúsculas)")
    password: str = Field(..., min_length=6, max_length=72, description="Contraseña en texto plano")
    nombre: str = Field(..., min_length=1, max_length=100)
    apellido: str = Field(..., min_length=1, max_length=100)
    rol: Rol = Field("user", description="user | admin | super_admin")

    @field_validator("email")
    @classmethod
    def email_minusculas(cls, v):
        return v.lower()

    class Config:
        json_schema_extra = {
            "example": {
                "email": "usuario1@mapaclientes.com",
                "password": "usuario123",
                "nombre": "Juan",
                "apellido": "Pérez",
                "rol": "user"
            }
        }


class UsuarioUpdate(BaseModel):
    """Schema para actualizar usuario; la contraseña no se modifica por aquí"""
    email: EmailStr = None
    nombre: str = Field(None, min_length=1, max_length=100)
    apellido: str = Field(None, min_length=1, max_length=100)
    rol: Rol = None
    activo: StrictBool = None

    @field_validator("email")
    @classmethod
    def email_minusculas(cls, v):
        return v.lower()


class UsuarioResponse(BaseModel):
    """Schema para respuesta de usuario (nunca incluye la contraseña)"""
    id: int = Field(..., description="ID del usuario")
    email: str
    nombre: str
    apellido: str
    rol: str
    activo: bool
    created_at: Optional[datetime] = Field(None, description="Fecha de creación")
    updated_at: Optional[datetime] = Field(None, description="Última actualización")

    class Config:
        from_attributes = True


class UsuarioStats(BaseModel):
    """Conteo de usuarios por estado y por rol"""
    total: int
    activos: int
    inactivos: int
    porRol: Dict[str, int] = Field(default_factory=dict)
