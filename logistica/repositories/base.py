"""
Repositorio genérico de entidades

Implementa una sola vez el patrón buscar / filtrar / paginar y el CRUD
completo. Cada entidad lo parametriza con su modelo, columnas de búsqueda,
columna de orden y el mapa de campos permitidos.
"""
import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import or_
from sqlalchemy.exc import (
    DataError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.orm import Session

from ..config import settings
from ..exceptions import (
    Conflict,
    EntityInUse,
    InvalidArgument,
    NotFound,
    ServiceUnavailable,
)

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def clean_text(value: Any) -> Optional[str]:
    """Texto recortado; vacío se guarda como NULL"""
    if value is None:
        return None
    return str(value).strip() or None


class EditableField:
    """Campo editable: columna destino y conversión del valor de entrada"""

    def __init__(self, column: str, convert: Callable[[Any], Any] = clean_text, default: Any = None):
        self.column = column
        self.convert = convert
        self.default = default


def _sqlstate(exc: IntegrityError) -> Optional[str]:
    orig = getattr(exc, "orig", None)
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def is_unique_violation(exc: IntegrityError) -> bool:
    code = _sqlstate(exc)
    if code:
        return code == UNIQUE_VIOLATION
    return "UNIQUE" in str(exc.orig).upper()


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    code = _sqlstate(exc)
    if code:
        return code == FOREIGN_KEY_VIOLATION
    return "FOREIGN KEY" in str(exc.orig).upper()


def _driver_detail(exc: SQLAlchemyError) -> Optional[str]:
    """Mensaje del driver solo fuera de producción"""
    if settings.is_production:
        return None
    return str(getattr(exc, "orig", None) or exc)


def _safe_rollback(db: Session) -> None:
    try:
        db.rollback()
    except SQLAlchemyError as exc:
        logger.debug(f"Rollback fallido tras error de base de datos: {exc}")


@contextmanager
def db_errors(
    db: Session,
    unique_message: str = "Ya existe un registro con esos datos",
    in_use_message: str = "El registro está siendo usado",
):
    """
    Traduce errores de SQLAlchemy a excepciones del servicio

    Hace rollback de la sesión antes de relanzar.
    """
    try:
        yield
    except IntegrityError as exc:
        _safe_rollback(db)
        logger.warning(f"Violación de integridad: {exc.orig}")
        if is_unique_violation(exc):
            raise Conflict(unique_message, _driver_detail(exc)) from exc
        if is_foreign_key_violation(exc):
            raise EntityInUse(in_use_message, _driver_detail(exc)) from exc
        raise InvalidArgument("Error de integridad de datos", _driver_detail(exc)) from exc
    except DataError as exc:
        _safe_rollback(db)
        logger.warning(f"Dato rechazado por la base de datos: {exc.orig}")
        raise InvalidArgument("Datos fuera de rango o con formato inválido", _driver_detail(exc)) from exc
    except (PoolTimeoutError, OperationalError, InterfaceError) as exc:
        _safe_rollback(db)
        logger.error(f"Base de datos no disponible: {exc}")
        raise ServiceUnavailable("Servicio de base de datos no disponible", str(exc)) from exc


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CrudRepository:
    """
    Repositorio CRUD parametrizado por entidad

    Atributos a definir en cada repositorio:
        model: modelo SQLAlchemy
        search_columns: nombres de columnas de texto para la búsqueda ILIKE
        order_column: columna de orden en los listados (ascendente salvo order_desc)
        fields: mapa campo de entrada -> EditableField (lista blanca de columnas editables)
        not_found_message / unique_message / in_use_message
    """

    model = None
    search_columns: Sequence[str] = ()
    order_column: str = "id"
    order_desc: bool = False
    fields: Dict[str, EditableField] = {}
    not_found_message = "Registro no encontrado"
    unique_message = "Ya existe un registro con esos datos"
    in_use_message = "No se puede eliminar el registro porque está siendo usado"

    def __init__(self, db: Session):
        self.db = db

    def _errors(self):
        return db_errors(self.db, self.unique_message, self.in_use_message)

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------

    def _apply_filters(self, query, filters: Dict[str, Any]):
        """Filtros específicos de la entidad (por defecto ninguno)"""
        return query

    def ordered(self, query):
        column = getattr(self.model, self.order_column)
        if self.order_desc:
            return query.order_by(column.desc(), self.model.id.desc())
        return query.order_by(column.asc(), self.model.id.asc())

    def list_page(
        self,
        page: int = 1,
        limit: int = 10,
        search: str = "",
        **filters: Any,
    ) -> Tuple[List[Any], int]:
        """Devuelve (items de la página, total de filas que cumplen el filtro)"""
        with self._errors():
            query = self.db.query(self.model)

            if search and search.strip():
                term = f"%{_escape_like(search.strip())}%"
                query = query.filter(
                    or_(*[
                        getattr(self.model, column).ilike(term, escape="\\")
                        for column in self.search_columns
                    ])
                )

            query = self._apply_filters(query, filters)
            total = query.count()
            items = self.ordered(query).offset((page - 1) * limit).limit(limit).all()
        return items, total

    def list_all(self) -> List[Any]:
        with self._errors():
            return self.ordered(self.db.query(self.model)).all()

    def find(self, entity_id: int):
        with self._errors():
            return self.db.query(self.model).filter(self.model.id == entity_id).first()

    def get_by_id(self, entity_id: int):
        entity = self.find(entity_id)
        if entity is None:
            raise NotFound(self.not_found_message)
        return entity

    def existing_ids(self, ids: Sequence[int]) -> List[int]:
        if not ids:
            return []
        with self._errors():
            rows = self.db.query(self.model.id).filter(self.model.id.in_(list(ids))).all()
        return [row[0] for row in rows]

    # ------------------------------------------------------------------
    # Escritura
    # ------------------------------------------------------------------

    def _collect(self, payload: Dict[str, Any], partial: bool) -> Dict[str, Any]:
        """
        Construye {columna: valor} desde el payload usando solo los campos permitidos

        En modo parcial solo entran los campos presentes; en modo completo
        los ausentes toman su valor por defecto.
        """
        values: Dict[str, Any] = {}
        for key, field in self.fields.items():
            if key in payload:
                values[field.column] = field.convert(payload[key])
            elif not partial:
                values[field.column] = field.default
        return values

    def create(self, payload: Dict[str, Any]):
        entity = self.model(**self._collect(payload, partial=False))
        with self._errors():
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
        logger.info(f"{self.model.__name__} creado: id={entity.id}")
        return entity

    def _apply(self, entity_id: int, values: Dict[str, Any]):
        entity = self.get_by_id(entity_id)
        with self._errors():
            for column, value in values.items():
                setattr(entity, column, value)
            self.db.commit()
            self.db.refresh(entity)
        return entity

    def update(self, entity_id: int, payload: Dict[str, Any]):
        """Reemplaza todos los campos editables"""
        return self._apply(entity_id, self._collect(payload, partial=False))

    def patch(self, entity_id: int, payload: Dict[str, Any]):
        """Actualiza solo los campos presentes en el payload"""
        values = self._collect(payload, partial=True)
        if not values:
            raise InvalidArgument(
                "No se proporcionaron campos válidos para actualizar",
                f"Campos permitidos: {', '.join(self.fields)}",
            )
        return self._apply(entity_id, values)

    def _snapshot(self, entity):
        """Copia transitoria para devolver el registro ya eliminado"""
        return self.model(**{
            column.key: getattr(entity, column.key)
            for column in self.model.__table__.columns
        })

    def delete(self, entity_id: int):
        entity = self.get_by_id(entity_id)
        snapshot = self._snapshot(entity)
        with self._errors():
            self.db.delete(entity)
            self.db.commit()
        logger.info(f"{self.model.__name__} eliminado: id={entity_id}")
        return snapshot
