"""
Controlador CRUD genérico

Se compone con un repositorio, el schema de salida y los schemas de entrada
de la entidad; los routers solo traducen la request HTTP a llamadas de este
objeto.
"""
import logging
from typing import Any, Callable, Optional, Type

from fastapi import status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..exceptions import EntityInUse, InvalidArgument
from ..repositories import CrudRepository
from ..utils.responses import paginated_response, success_response
from ..utils.validation import validate_payload

logger = logging.getLogger(__name__)

UsageGuard = Callable[[Session, int], bool]


class CrudController:
    """
    Args:
        repository: clase de repositorio (se instancia por request con la sesión)
        schema: schema Pydantic usado para serializar la entidad
        create_schema: schema de entrada completo (POST / PUT)
        update_schema: schema de entrada parcial (PATCH)
        singular / plural: nombres para los mensajes ("Camión" / "Camiones")
        usage_guard: función (db, id) -> bool; si devuelve True no se elimina
        in_use_message: mensaje cuando usage_guard bloquea la eliminación
    """

    def __init__(
        self,
        repository: Type[CrudRepository],
        schema: Type[BaseModel],
        create_schema: Type[BaseModel],
        update_schema: Type[BaseModel],
        singular: str,
        plural: str,
        usage_guard: Optional[UsageGuard] = None,
        in_use_message: Optional[str] = None,
    ):
        self.repository = repository
        self.schema = schema
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.singular = singular
        self.plural = plural
        self.usage_guard = usage_guard
        self.in_use_message = in_use_message or f"No se puede eliminar el {singular.lower()} porque está siendo usado"

    def serialize(self, entity) -> dict:
        return self.schema.model_validate(entity).model_dump(by_alias=True)

    def list(
        self,
        db: Session,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        **filters: Any,
    ):
        items, total = self.repository(db).list_page(
            page=page,
            limit=limit,
            search=search or "",
            **filters,
        )
        return paginated_response(
            [self.serialize(item) for item in items],
            page,
            limit,
            total,
            f"{self.plural} obtenidos exitosamente",
        )

    def get(self, db: Session, entity_id: int):
        entity = self.repository(db).get_by_id(entity_id)
        return success_response(self.serialize(entity), f"{self.singular} obtenido exitosamente")

    def create(self, db: Session, payload: Any):
        data = validate_payload(self.create_schema, payload, self.singular.lower())
        entity = self.repository(db).create(data)
        return success_response(
            self.serialize(entity),
            f"{self.singular} creado exitosamente",
            status.HTTP_201_CREATED,
        )

    def update(self, db: Session, entity_id: int, payload: Any):
        data = validate_payload(self.create_schema, payload, self.singular.lower())
        entity = self.repository(db).update(entity_id, data)
        return success_response(self.serialize(entity), f"{self.singular} actualizado exitosamente")

    def patch(self, db: Session, entity_id: int, payload: Any):
        if not isinstance(payload, dict) or not payload:
            raise InvalidArgument("No se proporcionaron datos para actualizar")
        data = validate_payload(self.update_schema, payload, self.singular.lower(), partial=True)
        entity = self.repository(db).patch(entity_id, data)
        return success_response(self.serialize(entity), f"{self.singular} actualizado exitosamente")

    def delete(self, db: Session, entity_id: int):
        repository = self.repository(db)
        repository.get_by_id(entity_id)

        if self.usage_guard is not None and self.usage_guard(db, entity_id):
            logger.warning(f"Eliminación bloqueada: {self.singular} {entity_id} tiene asignaciones")
            raise EntityInUse(self.in_use_message)

        entity = repository.delete(entity_id)
        return success_response(self.serialize(entity), f"{self.singular} eliminado exitosamente")
