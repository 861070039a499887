"""
Respuestas estándar de la API

Todas las respuestas llevan la misma envoltura JSON con marca de tiempo ISO-8601.
"""
import math
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def build_pagination(page: int, limit: int, total: int) -> dict:
    """Metadatos de paginación: totalPages = ceil(total / limit)"""
    total_pages = math.ceil(total / limit) if limit > 0 else 0
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "totalPages": total_pages,
        "hasNext": page < total_pages,
        "hasPrev": page > 1,
    }


def success_response(
    data: Any = None,
    message: str = "Operación exitosa",
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": True,
            "message": message,
            "data": jsonable_encoder(data),
            "timestamp": _timestamp(),
        },
    )


def error_response(
    message: str = "Error en la operación",
    status_code: int = status.HTTP_400_BAD_REQUEST,
    details: Optional[Any] = None,
) -> JSONResponse:
    content = {
        "success": False,
        "error": message,
        "timestamp": _timestamp(),
    }
    if details is not None:
        content["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=content)


def paginated_response(
    data: list,
    page: int,
    limit: int,
    total: int,
    message: str = "Datos obtenidos",
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "success": True,
            "message": message,
            "data": jsonable_encoder(data),
            "pagination": build_pagination(page, limit, total),
            "timestamp": _timestamp(),
        },
    )
