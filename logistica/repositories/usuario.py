"""
Repositorio de Usuarios
"""
from typing import Dict

from sqlalchemy import func

from ..models import Usuario
from ..utils.security import hash_password
from .base import CrudRepository, EditableField


class UsuarioRepository(CrudRepository):
    """Usuarios: búsqueda por email, nombre y apellido; filtros por rol y activo"""

    model = Usuario
    search_columns = ("email", "nombre", "apellido")
    order_column = "created_at"
    order_desc = True
    fields = {
        "email": EditableField("email"),
        "password": EditableField("password_hash", hash_password),
        "nombre": EditableField("nombre"),
        "apellido": EditableField("apellido"),
        "rol": EditableField("rol", default="user"),
        "activo": EditableField("activo", bool, default=True),
    }
    not_found_message = "Usuario no encontrado"
    unique_message = "El email ya está registrado"

    def _apply_filters(self, query, filters):
        rol = filters.get("rol")
        if rol:
            query = query.filter(Usuario.rol == rol)
        activo = filters.get("activo")
        if activo is not None:
            query = query.filter(Usuario.activo.is_(activo))
        return query

    def delete(self, entity_id: int):
        """Baja lógica: el usuario queda inactivo"""
        return self._apply(entity_id, {"activo": False})

    def stats(self) -> Dict:
        with self._errors():
            total = self.db.query(Usuario).count()
            activos = self.db.query(Usuario).filter(Usuario.activo.is_(True)).count()
            por_rol = (
                self.db.query(Usuario.rol, func.count(Usuario.id))
                .group_by(Usuario.rol)
                .all()
            )
        return {
            "total": total,
            "activos": activos,
            "inactivos": total - activos,
            "porRol": {rol: count for rol, count in por_rol},
        }
