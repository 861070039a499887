"""
Logística API - Servicio de clientes, camiones y días de entrega
FastAPI Application
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .exceptions import AppError, InternalError
from .models import dispose_engine, init_db
from .schemas import MAX_ID
from .utils import error_messages, error_response

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

GENERIC_ERROR_DETAIL = "Algo salió mal"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} iniciando ({settings.ENVIRONMENT})")
    if settings.AUTO_CREATE_TABLES:
        try:
            init_db()
        except SQLAlchemyError as exc:
            # El servicio arranca igual; /health reporta el problema
            logger.error(f"No se pudieron crear las tablas: {exc}")
    logger.info(f"Endpoints disponibles en: {settings.API_PREFIX}")

    yield

    dispose_engine()
    logger.info(f"{settings.APP_NAME} detenido")


# Crear aplicación FastAPI
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    description="""
    Backend de logística de reparto.

    ## Funcionalidades

    * **Clientes**: CRUD con búsqueda, filtro por activo y ubicación geográfica
    * **Camiones**: CRUD; no se eliminan mientras tengan días asignados
    * **Días de entrega**: CRUD con la misma restricción
    * **Asignaciones**: relación N:M camión-día con reasignación masiva atómica
    * **Usuarios**: alta con contraseña hasheada, filtros por rol y estado, baja lógica
    """,
)

# Configurar CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# MANEJO DE ERRORES
# ============================================================================

def _public_details(status_code: int, details):
    if status_code >= 500 and settings.is_production:
        return GENERIC_ERROR_DETAIL
    return details


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message} ({exc.details})")
    return error_response(exc.message, exc.status_code, _public_details(exc.status_code, exc.details))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    locations = {error["loc"][0] for error in errors if error.get("loc")}
    if "path" in locations:
        return error_response(
            "ID inválido",
            status.HTTP_400_BAD_REQUEST,
            [f"El ID debe ser un entero entre 1 y {MAX_ID}"],
        )
    message = "Parámetros de consulta inválidos" if "query" in locations else "Datos de la petición inválidos"
    return error_response(message, status.HTTP_400_BAD_REQUEST, error_messages(errors))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return error_response(
            "Recurso no encontrado",
            status.HTTP_404_NOT_FOUND,
            f"La ruta {request.url.path} no existe",
        )
    return error_response(str(exc.detail), exc.status_code)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Error no controlado en {request.method} {request.url.path}")
    error = InternalError("Error interno del servidor", str(exc))
    return error_response(
        error.message,
        error.status_code,
        _public_details(error.status_code, error.details),
    )


# Importar y configurar routers después de crear la app para evitar imports circulares
from .routers import (  # noqa: E402
    camiones_router,
    clientes_router,
    dias_entrega_router,
    health_router,
    usuarios_router,
)

app.include_router(clientes_router, prefix=settings.API_PREFIX)
app.include_router(camiones_router, prefix=settings.API_PREFIX)
app.include_router(dias_entrega_router, prefix=settings.API_PREFIX)
app.include_router(usuarios_router, prefix=settings.API_PREFIX)
app.include_router(health_router, prefix=settings.API_PREFIX)
app.include_router(health_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "logistica.main:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        reload=settings.DEBUG
    )
