"""
Router de Health Check
"""
import logging
import time

from fastapi import APIRouter, Depends, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import settings
from ..models import get_db
from ..schemas import DatabaseStatus, HealthResponse
from ..utils import error_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

STARTED_AT = time.monotonic()


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Verifica la base de datos con SELECT 1; 503 si no responde"""
    start = time.perf_counter()
    try:
        db.execute(text("SELECT 1"))
        elapsed_ms = (time.perf_counter() - start) * 1000
        database = DatabaseStatus(status="healthy", responseTime=f"{elapsed_ms:.0f}ms")
    except SQLAlchemyError as exc:
        logger.error(f"Health check: base de datos no disponible: {exc}")
        database = DatabaseStatus(status="unhealthy", error=str(exc))

    healthy = database.status == "healthy"
    report = HealthResponse(
        message="Sistema saludable" if healthy else "Sistema con problemas",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        uptime=round(time.monotonic() - STARTED_AT, 3),
        database=database,
    ).model_dump()

    if healthy:
        return success_response(report, "Sistema completamente saludable")
    return error_response(
        "Sistema con problemas",
        status.HTTP_503_SERVICE_UNAVAILABLE,
        report,
    )
