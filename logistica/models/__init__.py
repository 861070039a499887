"""
Modelos de la base de datos
"""
from .database import (
    Base,
    SessionLocal,
    build_engine,
    dispose_engine,
    engine,
    get_db,
    init_db,
)
from .cliente import Cliente
from .camion import Camion
from .dia_entrega import DiaEntrega
from .camion_dia import CamionDia
from .usuario import Usuario

__all__ = [
    "Base",
    "SessionLocal",
    "build_engine",
    "dispose_engine",
    "engine",
    "get_db",
    "init_db",
    "Cliente",
    "Camion",
    "DiaEntrega",
    "CamionDia",
    "Usuario",
]
