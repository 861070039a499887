"""
Excepciones del servicio

Los repositorios y controladores lanzan estas excepciones; los handlers
registrados en main las convierten en la respuesta de error estándar.
"""
from typing import Any, Optional


class AppError(Exception):
    """Excepción base del servicio"""

    status_code: int = 500
    code: str = "internal"

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidArgument(AppError):
    """ID o payload mal formado"""
    status_code = 400
    code = "invalid_argument"


class ValidationFailed(AppError):
    """Violaciones de reglas de campos; details lleva la lista completa"""
    status_code = 400
    code = "validation_failed"

    def __init__(self, message: str, errors: list):
        super().__init__(message, details=list(errors))
        self.errors = list(errors)


class NotFound(AppError):
    status_code = 404
    code = "not_found"


class Conflict(AppError):
    """Violación de unicidad"""
    status_code = 409
    code = "conflict"


class EntityInUse(Conflict):
    """La entidad está referenciada por asignaciones y no puede eliminarse"""
    status_code = 400
    code = "referential"


class ServiceUnavailable(AppError):
    """Base de datos inaccesible o pool agotado"""
    status_code = 503
    code = "service_unavailable"


class InternalError(AppError):
    status_code = 500
    code = "internal"
