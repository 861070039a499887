"""
Router de Usuarios
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Path, Query
from sqlalchemy.orm import Session

from ..config import settings
from ..models import get_db
from ..repositories import UsuarioRepository
from ..schemas import MAX_ID, UsuarioCreate, UsuarioResponse, UsuarioStats, UsuarioUpdate
from ..schemas.usuario import Rol
from ..utils import success_response
from .crud import CrudController

router = APIRouter(prefix="/usuarios", tags=["usuarios"])

controller = CrudController(
    repository=UsuarioRepository,
    schema=UsuarioResponse,
    create_schema=UsuarioCreate,
    update_schema=UsuarioUpdate,
    singular="Usuario",
    plural="Usuarios",
)


@router.get("")
def list_usuarios(
    page: int = Query(1, ge=1, le=MAX_ID),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    search: Optional[str] = Query(None, description="Busca en email, nombre y apellido"),
    rol: Optional[Rol] = Query(None, description="user | admin | super_admin"),
    activo: Optional[bool] = Query(None, description="true | false"),
    db: Session = Depends(get_db),
):
    """Listar usuarios (más recientes primero)"""
    return controller.list(db, page, limit, search, rol=rol, activo=activo)


@router.get("/stats")
def get_usuarios_stats(db: Session = Depends(get_db)):
    """Totales de usuarios activos, inactivos y por rol"""
    stats = UsuarioStats(**UsuarioRepository(db).stats())
    return success_response(stats.model_dump(), "Estadísticas obtenidas exitosamente")


@router.get("/{usuario_id}")
def get_usuario(usuario_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    return controller.get(db, usuario_id)


@router.post("")
def create_usuario(payload: Any = Body(None), db: Session = Depends(get_db)):
    """Crear usuario; la contraseña se guarda como hash bcrypt"""
    return controller.create(db, payload)


@router.put("/{usuario_id}")
@router.patch("/{usuario_id}")
def update_usuario(
    usuario_id: int = Path(..., gt=0, le=MAX_ID),
    payload: Any = Body(None),
    db: Session = Depends(get_db),
):
    """Actualizar los campos enviados (email, nombre, apellido, rol, activo)"""
    return controller.patch(db, usuario_id, payload)


@router.delete("/{usuario_id}")
def delete_usuario(usuario_id: int = Path(..., gt=0, le=MAX_ID), db: Session = Depends(get_db)):
    """Desactivar usuario (baja lógica)"""
    return controller.delete(db, usuario_id)
