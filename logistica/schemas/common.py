"""
Schemas comunes
"""
from pydantic import BaseModel, Field, StrictInt
from typing import Annotated, Optional

# Máximo de una columna INTEGER en PostgreSQL; IDs mayores no pueden existir
MAX_ID = 2_147_483_647

EntityId = Annotated[StrictInt, Field(gt=0, le=MAX_ID)]


class DatabaseStatus(BaseModel):
    status: str = Field(..., description="healthy | unhealthy")
    responseTime: Optional[str] = Field(None, description="Tiempo de respuesta de SELECT 1")
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """Schema del health check"""
    message: str
    service: str
    version: str
    uptime: float = Field(..., description="Segundos desde el arranque")
    database: DatabaseStatus
