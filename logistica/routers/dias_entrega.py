"""
Router de Días de Entrega y sus camiones asignados
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Path, Query
from sqlalchemy.orm import Session

from ..config import settings
from ..models import get_db
from ..repositories import DIA_ENTREGA, CamionDiaRepository, DiaEntregaRepository
from ..schemas import (
    MAX_ID,
    AsignarCamionesRequest,
    CamionResponse,
    DiaEntregaConCamionesResponse,
    DiaEntregaCreate,
    DiaEntregaResponse,
    DiaEntregaUpdate,
)
from ..utils import success_response
from .crud import CrudController

router = APIRouter(prefix="/dias-entrega", tags=["dias-entrega"])


def dia_en_uso(db: Session, dia_id: int) -> bool:
    return CamionDiaRepository(db).is_referenced(DIA_ENTREGA, dia_id)


controller = CrudController(
    repository=DiaEntregaRepository,
    schema=DiaEntregaResponse,
    create_schema=DiaEntregaCreate,
    update_schema=DiaEntregaUpdate,
    singular="Día de entrega",
    plural="Días de entrega",
    usage_guard=dia_en_uso,
    in_use_message="No se puede eliminar el día de entrega porque está siendo usado",
)


@router.get("")
def list_dias_entrega(
    page: int = Query(1, ge=1, le=MAX_ID),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    search: Optional[str] = Query(None, description="Busca en la descripción"),
    db: Session = Depends(get_db),
):
    """Listar días de entrega (orden por ID)"""
    return controller.list(db, page, limit, search)


@router.get("/con-camiones")
def list_dias_con_camiones(db: Session = Depends(get_db)):
    """Todos los días con sus camiones asignados"""
    rows = CamionDiaRepository(db).list_with_counterparts(DIA_ENTREGA)
    data = [
        DiaEntregaConCamionesResponse(**row, camiones_asignados=row["asignados"]).model_dump()
        for row in rows
    ]
    return success_response(data, "Días de entrega con camiones obtenidos exitosamente")


@router.get("/{dia_id}")
def get_dia_entrega(dia_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    return controller.get(db, dia_id)


@router.post("")
def create_dia_entrega(payload: Any = Body(None), db: Session = Depends(get_db)):
    return controller.create(db, payload)


@router.put("/{dia_id}")
def update_dia_entrega(
    dia_id: int = Path(..., gt=0, le=MAX_ID),
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    return controller.update(db, dia_id, payload)


@router.patch("/{dia_id}")
def patch_dia_entrega(
    dia_id: int = Path(..., gt=0, le=MAX_ID),
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    return controller.patch(db, dia_id, payload)


@router.delete("/{dia_id}")
def delete_dia_entrega(dia_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Eliminar día de entrega; bloqueado mientras tenga camiones asignados"""
    return controller.delete(db, dia_id)


# ============================================================================
# ASIGNACIONES DÍA -> CAMIONES
# ============================================================================

@router.get("/{dia_id}/camiones")
def get_camiones_del_dia(dia_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Camiones asignados al día de entrega"""
    camiones = CamionDiaRepository(db).list_assigned_counterparts(DIA_ENTREGA, dia_id)
    return success_response(
        [CamionResponse.model_validate(c).model_dump() for c in camiones],
        "Camiones del día obtenidos exitosamente",
    )


@router.post("/{dia_id}/camiones")
def asignar_camiones_al_dia(
    payload: AsignarCamionesRequest,
    dia_id: int = Path(..., gt=0, le=MAX_ID),
    db: Session = Depends(get_db),
):
    """Reemplaza todos los camiones del día. Body: {"camionesIds": [1, 2]}"""
    camiones = CamionDiaRepository(db).replace_assignments(DIA_ENTREGA, dia_id, payload.camionesIds)
    return success_response(
        [CamionResponse.model_validate(c).model_dump() for c in camiones],
        "Camiones asignados al día exitosamente",
    )
