"""
Routers de la API
"""
from .clientes import router as clientes_router
from .camiones import router as camiones_router
from .dias_entrega import router as dias_entrega_router
from .usuarios import router as usuarios_router
from .health import router as health_router

__all__ = [
    "clientes_router",
    "camiones_router",
    "dias_entrega_router",
    "usuarios_router",
    "health_router",
]
