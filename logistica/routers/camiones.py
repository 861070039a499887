"""
Router de Camiones y sus días de entrega asignados
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Path, Query
from sqlalchemy.orm import Session

from ..config import settings
from ..models import get_db
from ..repositories import CAMION, CamionDiaRepository, CamionRepository
from ..schemas import (
    MAX_ID,
    AsignarDiasRequest,
    CamionConDiasResponse,
    CamionCreate,
    CamionResponse,
    CamionUpdate,
    DiaEntregaResponse,
)
from ..utils import success_response
from .crud import CrudController

router = APIRouter(prefix="/camiones", tags=["camiones"])


def camion_en_uso(db: Session, camion_id: int) -> bool:
    return CamionDiaRepository(db).is_referenced(CAMION, camion_id)


controller = CrudController(
    repository=CamionRepository,
    schema=CamionResponse,
    create_schema=CamionCreate,
    update_schema=CamionUpdate,
    singular="Camión",
    plural="Camiones",
    usage_guard=camion_en_uso,
    in_use_message="No se puede eliminar el camión porque está siendo usado",
)


@router.get("")
def list_camiones(
    page: int = Query(1, ge=1, le=MAX_ID),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    search: Optional[str] = Query(None, description="Busca en la descripción"),
    db: Session = Depends(get_db),
):
    """Listar camiones con paginación"""
    return controller.list(db, page, limit, search)


@router.get("/con-dias")
def list_camiones_con_dias(db: Session = Depends(get_db)):
    """Todos los camiones con sus días asignados"""
    rows = CamionDiaRepository(db).list_with_counterparts(CAMION)
    data = [
        CamionConDiasResponse(**row, dias_asignados=row["asignados"]).model_dump()
        for row in rows
    ]
    return success_response(data, "Camiones con días obtenidos exitosamente")


@router.get("/{camion_id}")
def get_camion(camion_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    return controller.get(db, camion_id)


@router.post("")
def create_camion(payload: Any = Body(None), db: Session = Depends(get_db)):
    return controller.create(db, payload)


@router.put("/{camion_id}")
def update_camion(
    camion_id: int = Path(..., gt=0, le=MAX_ID),
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    return controller.update(db, camion_id, payload)


@router.patch("/{camion_id}")
def patch_camion(
    camion_id: int = Path(..., gt=0, le=MAX_ID),
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    return controller.patch(db, camion_id, payload)


@router.delete("/{camion_id}")
def delete_camion(camion_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Eliminar camión; bloqueado mientras tenga días asignados"""
    return controller.delete(db, camion_id)


# ============================================================================
# ASIGNACIONES CAMIÓN -> DÍAS
# ============================================================================

@router.get("/{camion_id}/dias")
def get_dias_del_camion(camion_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Días de entrega asignados al camión"""
    dias = CamionDiaRepository(db).list_assigned_counterparts(CAMION, camion_id)
    return success_response(
        [DiaEntregaResponse.model_validate(d).model_dump() for d in dias],
        "Días del camión obtenidos exitosamente",
    )


@router.post("/{camion_id}/dias")
def asignar_dias_al_camion(
    payload: AsignarDiasRequest,
    camion_id: int = Path(..., gt=0, le=MAX_ID),
    db: Session = Depends(get_db),
):
    """
    Reemplaza todos los días asignados al camión por la lista enviada

    Body: {"diasIds": [1, 2, 3]}; una lista vacía quita todas las asignaciones.
    """
    dias = CamionDiaRepository(db).replace_assignments(CAMION, camion_id, payload.diasIds)
    return success_response(
        [DiaEntregaResponse.model_validate(d).model_dump() for d in dias],
        "Días asignados al camión exitosamente",
    )
