"""
Router de Clientes
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Path, Query
from sqlalchemy.orm import Session

from ..config import settings
from ..models import get_db
from ..repositories import ClienteRepository
from ..schemas import MAX_ID, ClienteCreate, ClienteResponse, ClienteUpdate, UbicacionResponse
from ..utils import success_response
from .crud import CrudController

router = APIRouter(prefix="/clientes", tags=["clientes"])

controller = CrudController(
    repository=ClienteRepository,
    schema=ClienteResponse,
    create_schema=ClienteCreate,
    update_schema=ClienteUpdate,
    singular="Cliente",
    plural="Clientes",
)


@router.get("")
def list_clientes(
    page: int = Query(1, ge=1, le=MAX_ID, description="Página"),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT, description="Registros por página"),
    search: Optional[str] = Query(None, description="Busca en nombre, razón social y dirección"),
    activo: Optional[bool] = Query(None, description="true | false"),
    db: Session = Depends(get_db),
):
    """Listar clientes con paginación y filtros"""
    return controller.list(db, page, limit, search, activo=activo)


@router.get("/activos")
def list_clientes_activos(db: Session = Depends(get_db)):
    """Todos los clientes activos ordenados por nombre"""
    clientes = ClienteRepository(db).list_activos()
    return success_response(
        [controller.serialize(c) for c in clientes],
        "Clientes activos obtenidos exitosamente",
    )


@router.get("/con-ubicacion")
def list_clientes_con_ubicacion(db: Session = Depends(get_db)):
    """Clientes con ambas coordenadas cargadas"""
    clientes = ClienteRepository(db).list_con_ubicacion()
    return success_response(
        [controller.serialize(c) for c in clientes],
        "Clientes con ubicación obtenidos exitosamente",
    )


@router.get("/{cliente_id}")
def get_cliente(cliente_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Obtener cliente por ID"""
    return controller.get(db, cliente_id)


@router.get("/{cliente_id}/ubicacion")
def get_cliente_ubicacion(cliente_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Solo las coordenadas del cliente; 404 si no tiene ubicación"""
    ubicacion = ClienteRepository(db).get_ubicacion(cliente_id)
    return success_response(
        UbicacionResponse(**ubicacion).model_dump(),
        "Ubicación del cliente obtenida exitosamente",
    )


@router.post("")
def create_cliente(payload: Any = Body(None), db: Session = Depends(get_db)):
    """Crear cliente"""
    return controller.create(db, payload)


@router.put("/{cliente_id}")
def update_cliente(
    cliente_id: int = Path(..., gt=0, le=MAX_ID),
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    """Actualizar cliente completo"""
    return controller.update(db, cliente_id, payload)


@router.patch("/{cliente_id}")
def patch_cliente(
    cliente_id: int = Path(..., gt=0, le=MAX_ID),
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    """Actualizar solo los campos enviados"""
    return controller.patch(db, cliente_id, payload)


@router.delete("/{cliente_id}")
def delete_cliente(cliente_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Eliminar cliente (baja lógica salvo CLIENTE_SOFT_DELETE=false)"""
    return controller.delete(db, cliente_id)
