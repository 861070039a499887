"""
Repositorio de Camiones
"""
from ..models import Camion
from .base import CrudRepository, EditableField


class CamionRepository(CrudRepository):
    model = Camion
    search_columns = ("descripcion",)
    order_column = "descripcion"
    fields = {"descripcion": EditableField("descripcion")}
    not_found_message = "Camión no encontrado"
    unique_message = "Ya existe un camión con esa descripción"
    in_use_message = "No se puede eliminar el camión porque está siendo usado"
