"""
Schemas Pydantic de entrada (validación) y salida (serialización)
"""
from .common import MAX_ID, EntityId, DatabaseStatus, HealthResponse
from .cliente import ClienteCreate, ClienteUpdate, ClienteResponse, UbicacionResponse
from .camion import (
    CamionCreate,
    CamionUpdate,
    AsignarDiasRequest,
    CamionResponse,
    CamionConDiasResponse,
    AsignadoResponse,
)
from .dia_entrega import (
    DiaEntregaCreate,
    DiaEntregaUpdate,
    AsignarCamionesRequest,
    DiaEntregaResponse,
    DiaEntregaConCamionesResponse,
)
from .usuario import UsuarioCreate, UsuarioUpdate, UsuarioResponse, UsuarioStats

__all__ = [
    # Comunes
    "MAX_ID",
    "EntityId",
    "DatabaseStatus",
    "HealthResponse",
    # Cliente
    "ClienteCreate",
    "ClienteUpdate",
    "ClienteResponse",
    "UbicacionResponse",
    # Camión
    "CamionCreate",
    "CamionUpdate",
    "AsignarDiasRequest",
    "CamionResponse",
    "CamionConDiasResponse",
    "AsignadoResponse",
    # Día de entrega
    "DiaEntregaCreate",
    "DiaEntregaUpdate",
    "AsignarCamionesRequest",
    "DiaEntregaResponse",
    "DiaEntregaConCamionesResponse",
    # Usuario
    "UsuarioCreate",
    "UsuarioUpdate",
    "UsuarioResponse",
    "UsuarioStats",
]
