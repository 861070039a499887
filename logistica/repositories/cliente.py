"""
Repositorio de Clientes
"""
from typing import Any, List, Optional

from ..config import settings
from ..exceptions import NotFound
from ..models import Cliente
from .base import CrudRepository, EditableField


def _to_activo(value: Any) -> bool:
    return True if value is None else bool(value)


def _as_is(value: Any):
    return value


class ClienteRepository(CrudRepository):
    """Clientes: búsqueda por nombre, razón social y dirección; filtro por activo"""

    model = Cliente
    search_columns = ("nombre", "razon", "direccion")
    order_column = "nombre"
    fields = {
        "codigo_alternativo": EditableField("codigo_alternativo"),
        "nombre": EditableField("nombre"),
        "razon": EditableField("razon"),
        "direccion": EditableField("direccion"),
        "telefono": EditableField("telefono"),
        "rut": EditableField("rut"),
        "activo": EditableField("activo", _to_activo, default=True),
        "x": EditableField("x", _as_is),
        "y": EditableField("y", _as_is),
    }
    not_found_message = "Cliente no encontrado"
    unique_message = "Ya existe un cliente con ese código alternativo"
    in_use_message = "No se puede eliminar el cliente porque está siendo usado"

    def __init__(self, db, soft_delete: Optional[bool] = None):
        super().__init__(db)
        self.soft_delete = settings.CLIENTE_SOFT_DELETE if soft_delete is None else soft_delete

    def _apply_filters(self, query, filters):
        activo = filters.get("activo")
        if activo is not None:
            query = query.filter(Cliente.activo.is_(activo))
        return query

    def delete(self, entity_id: int):
        """Baja lógica (activo = false) o física según CLIENTE_SOFT_DELETE"""
        if not self.soft_delete:
            return super().delete(entity_id)
        return self._apply(entity_id, {"activo": False})

    def get_ubicacion(self, entity_id: int) -> dict:
        cliente = self.get_by_id(entity_id)
        if cliente.x is None or cliente.y is None:
            raise NotFound("El cliente no tiene ubicación registrada")
        return {"id": cliente.id, "nombre": cliente.nombre, "x": cliente.x, "y": cliente.y}

    def list_activos(self) -> List[Cliente]:
        with self._errors():
            return self.ordered(
                self.db.query(Cliente).filter(Cliente.activo.is_(True))
            ).all()

    def list_con_ubicacion(self) -> List[Cliente]:
        with self._errors():
            return self.ordered(
                self.db.query(Cliente).filter(Cliente.x.isnot(None), Cliente.y.isnot(None))
            ).all()
