"""
Repositorios de acceso a datos

Los repositorios reciben la sesión por parámetro y lanzan las excepciones
del servicio; no contienen lógica de presentación.
"""
from .base import CrudRepository, EditableField, db_errors
from .cliente import ClienteRepository
from .camion import CamionRepository
from .dia_entrega import DiaEntregaRepository
from .camion_dia import CamionDiaRepository, CAMION, DIA_ENTREGA
from .usuario import UsuarioRepository

__all__ = [
    "CrudRepository",
    "EditableField",
    "db_errors",
    "ClienteRepository",
    "CamionRepository",
    "DiaEntregaRepository",
    "CamionDiaRepository",
    "CAMION",
    "DIA_ENTREGA",
    "UsuarioRepository",
]
