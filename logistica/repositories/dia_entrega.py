"""
Repositorio de Días de Entrega
"""
from ..models import DiaEntrega
from .base import CrudRepository, EditableField


class DiaEntregaRepository(CrudRepository):
    # Los días se listan en su orden natural de carga (Lunes, Martes, ...)
    model = DiaEntrega
    search_columns = ("descripcion",)
    order_column = "id"
    fields = {"descripcion": EditableField("descripcion")}
    not_found_message = "Día de entrega no encontrado"
    unique_message = "Ya existe un día de entrega con esa descripción"
    in_use_message = "No se puede eliminar el día de entrega porque está siendo usado"
