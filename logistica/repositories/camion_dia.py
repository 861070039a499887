"""
Repositorio de Asignaciones Camión-Día

Gestiona la relación N:M entre camiones y días de entrega: verificación de
uso antes de eliminar, listado de contrapartes y reasignación masiva.
"""
import logging
from typing import Dict, List, Sequence

from sqlalchemy.orm import Session

from ..exceptions import InvalidArgument, NotFound
from ..models import CamionDia
from .base import db_errors
from .camion import CamionRepository
from .dia_entrega import DiaEntregaRepository

logger = logging.getLogger(__name__)

CAMION = "camion"
DIA_ENTREGA = "dia_entrega"


class _Side:
    """Un extremo de la relación: su repositorio y su FK en camiones_dias"""

    def __init__(self, repository_class, fk_column: str, label: str):
        self.repository_class = repository_class
        self.fk_column = fk_column
        self.label = label

    @property
    def fk(self):
        return getattr(CamionDia, self.fk_column)


_SIDES = {
    CAMION: _Side(CamionRepository, "camion_id", "Camiones"),
    DIA_ENTREGA: _Side(DiaEntregaRepository, "dia_entrega_id", "Días de entrega"),
}
_COUNTERPART = {CAMION: DIA_ENTREGA, DIA_ENTREGA: CAMION}


class CamionDiaRepository:
    """Repositorio de la tabla camiones_dias"""

    def __init__(self, db: Session):
        self.db = db

    def _sides(self, entity_kind: str):
        if entity_kind not in _SIDES:
            raise InvalidArgument(f"Tipo de entidad desconocido: {entity_kind}")
        owner = _SIDES[entity_kind]
        counterpart = _SIDES[_COUNTERPART[entity_kind]]
        return owner, counterpart

    def is_referenced(self, entity_kind: str, entity_id: int) -> bool:
        """True si la entidad tiene al menos una asignación"""
        owner, _ = self._sides(entity_kind)
        with db_errors(self.db):
            count = self.db.query(CamionDia).filter(owner.fk == entity_id).count()
        return count > 0

    def list_assigned_counterparts(self, entity_kind: str, entity_id: int) -> list:
        """Días de un camión, o camiones de un día"""
        owner, counterpart = self._sides(entity_kind)
        owner.repository_class(self.db).get_by_id(entity_id)

        counterpart_repo = counterpart.repository_class(self.db)
        model = counterpart_repo.model
        with db_errors(self.db):
            query = (
                self.db.query(model)
                .join(CamionDia, counterpart.fk == model.id)
                .filter(owner.fk == entity_id)
            )
            return counterpart_repo.ordered(query).all()

    def replace_assignments(
        self,
        entity_kind: str,
        entity_id: int,
        counterpart_ids: Sequence[int],
    ) -> list:
        """
        Reemplaza todas las asignaciones de la entidad por la lista indicada

        Borrado e inserciones van en una única transacción: ante cualquier
        error se hace rollback y la entidad conserva sus asignaciones previas.
        Una lista vacía elimina todas las asignaciones.
        """
        owner, counterpart = self._sides(entity_kind)
        owner.repository_class(self.db).get_by_id(entity_id)

        ids: List[int] = list(dict.fromkeys(counterpart_ids))
        found = set(counterpart.repository_class(self.db).existing_ids(ids))
        missing = [cid for cid in ids if cid not in found]
        if missing:
            raise NotFound(f"{counterpart.label} no encontrados", missing)

        with db_errors(self.db, unique_message="Asignación duplicada"):
            try:
                self.db.query(CamionDia).filter(owner.fk == entity_id).delete(
                    synchronize_session=False
                )
                for cid in ids:
                    self._add_link(owner, counterpart, entity_id, cid)
                self.db.flush()
                self.db.commit()
            except Exception:
                self.db.rollback()
                raise

        logger.info(
            f"Asignaciones reemplazadas: {entity_kind}={entity_id} -> {ids}"
        )
        return self.list_assigned_counterparts(entity_kind, entity_id)

    def _add_link(self, owner: _Side, counterpart: _Side, owner_id: int, counterpart_id: int) -> None:
        self.db.add(CamionDia(**{
            owner.fk_column: owner_id,
            counterpart.fk_column: counterpart_id,
        }))

    def list_with_counterparts(self, entity_kind: str) -> List[Dict]:
        """
        Todas las entidades del tipo con sus contrapartes asignadas

        Returns:
            [{id, descripcion, created_at, updated_at, asignados: [{id, descripcion}]}]
        """
        owner, counterpart = self._sides(entity_kind)
        owners = owner.repository_class(self.db).list_all()
        counterpart_repo = counterpart.repository_class(self.db)
        model = counterpart_repo.model

        with db_errors(self.db):
            query = (
                self.db.query(owner.fk, model)
                .select_from(CamionDia)
                .join(model, counterpart.fk == model.id)
            )
            links = counterpart_repo.ordered(query).all()

        assigned: Dict[int, List[Dict]] = {}
        for owner_id, item in links:
            assigned.setdefault(owner_id, []).append(
                {"id": item.id, "descripcion": item.descripcion}
            )

        return [
            {
                "id": item.id,
                "descripcion": item.descripcion,
                "created_at": item.created_at,
                "updated_at": item.updated_at,
                "asignados": assigned.get(item.id, []),
            }
            for item in owners
        ]
