"""
Generic service for per-user tracked records.

Every tracker category (workouts, calorie entries, water, BMR/BMI profile...)
shares the same lifecycle: insert, soft-delete, list the caller's active rows
and update in place. A ``TrackedResource`` describes one category and a
``TrackedResourceService`` runs the operations for it. Every statement is
filtered by the caller's ``user_id``; rows are never physically deleted.

Mutating operations return the refreshed active list so the caller can
redraw its view from the response.
"""
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Optional, Tuple, Type

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from healthtrack.core.errors import StorageError
from healthtrack.models.tracked import TrackedRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackedResource:
    """Describes one tracker category."""
    name: str
    model: Type[TrackedRecord]
    fields: Tuple[str, ...]  # Mutable payload columns
    singleton: bool = False  # At most one row per user
    accumulate: FrozenSet[str] = frozenset()  # Updated by adding a delta
    reset_values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        unknown = (set(self.accumulate) | set(self.reset_values)) - set(self.fields)
        if unknown:
            raise ValueError(f"{self.name}: not payload fields: {sorted(unknown)}")


class TrackedResourceService:
    """Insert / soft-delete / list-active / update for one tracker category."""

    def __init__(self, resource: TrackedResource):
        self.resource = resource
        self.model = resource.model

    @contextmanager
    def _storage(self, db: Session, action: str, commit: bool = True) -> Iterator[None]:
        try:
            yield
            if commit:
                db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"{action} on {self.resource.name} failed: {e}", exc_info=True)
            raise StorageError(f"Could not {action} {self.resource.name}") from e

    def _owned(
        self,
        db: Session,
        user_id: int,
        record_id: Optional[int] = None,
        include_deleted: bool = False
    ) -> Query:
        """Rows of ``user_id``, optionally narrowed to one record id."""
        query = db.query(self.model).filter(self.model.user_id == user_id)
        if not include_deleted:
            query = query.filter(self.model.deleted_flag.is_(False))
        if record_id is not None:
            query = query.filter(self.model.id == record_id)
        return query

    def _payload(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        unknown = set(payload) - set(self.resource.fields)
        if unknown:
            raise ValueError(f"Unknown {self.resource.name} fields: {sorted(unknown)}")
        return dict(payload)

    def _write(self, db: Session, user_id: int, record_id: Optional[int], assignments: Dict, action: str) -> int:
        if record_id is None and not self.resource.singleton:
            raise ValueError(f"{action} on {self.resource.name} needs a record id")
        if not assignments:
            return 0

        with self._storage(db, action):
            matched = self._owned(db, user_id, record_id).update(assignments, synchronize_session="fetch")

        if not matched:
            logger.info(f"{action} on {self.resource.name} matched no rows for user {user_id} (record {record_id})")
        return matched

    def list_active(self, db: Session, user_id: int) -> List[TrackedRecord]:
        """All rows of ``user_id`` that are not soft-deleted."""
        with self._storage(db, "list", commit=False):
            # populate_existing: observe bulk UPDATEs issued earlier on this session
            return (
                self._owned(db, user_id)
                .order_by(self.model.id)
                .populate_existing()
                .all()
            )

    def _assignments(self, values: Mapping[str, Any]) -> Dict:
        """UPDATE assignments for a payload; accumulating fields add their delta."""
        assignments = {}
        for name, value in values.items():
            column = getattr(self.model, name)
            assignments[column] = column + value if name in self.resource.accumulate else value
        return assignments

    def _singleton_row(self, db: Session, user_id: int) -> Optional[TrackedRecord]:
        """The caller's singleton row, soft-deleted or not."""
        with self._storage(db, "insert", commit=False):
            return self._owned(db, user_id, include_deleted=True).populate_existing().first()

    def _create(self, db: Session, user_id: int, values: Mapping[str, Any]) -> bool:
        """Add a new row. Returns False when a concurrent request created the singleton first."""
        try:
            db.add(self.model(user_id=user_id, deleted_flag=False, **values))
            db.commit()
            return True
        except IntegrityError as e:
            db.rollback()
            if not self.resource.singleton:
                logger.error(f"insert on {self.resource.name} failed: {e}", exc_info=True)
                raise StorageError(f"Could not insert {self.resource.name}") from e
            logger.info(f"{self.resource.name} for user {user_id} already created, updating instead")
            return False
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"insert on {self.resource.name} failed: {e}", exc_info=True)
            raise StorageError(f"Could not insert {self.resource.name}") from e

    def _merge(self, db: Session, user_id: int, record: TrackedRecord, values: Mapping[str, Any]) -> None:
        """Apply an insert payload to the existing singleton row."""
        if record.deleted_flag:
            # Revived rows start from the reset values, the payload is written as-is
            assignments = {getattr(self.model, name): value for name, value in self.resource.reset_values.items()}
            assignments[self.model.deleted_flag] = False
            assignments.update({getattr(self.model, name): value for name, value in values.items()})
        else:
            assignments = self._assignments(values)
        if not assignments:
            return

        with self._storage(db, "insert"):
            self._owned(db, user_id, record.id, include_deleted=True).update(
                assignments, synchronize_session="fetch"
            )

    def upsert(self, db: Session, user_id: int, payload: Mapping[str, Any]) -> Tuple[List[TrackedRecord], bool]:
        """
        Add a row for ``user_id`` and report whether one was created.

        Singleton categories never get a second row: when one exists the
        payload goes through the update rules instead (accumulating fields
        add to the stored value). A soft-deleted singleton is reset and made
        active again.
        """
        values = self._payload(payload)

        record = self._singleton_row(db, user_id) if self.resource.singleton else None
        if record is None:
            if self._create(db, user_id, values):
                return self.list_active(db, user_id), True
            record = self._singleton_row(db, user_id)
            if record is None:
                raise StorageError(f"Could not insert {self.resource.name}")

        self._merge(db, user_id, record, values)
        return self.list_active(db, user_id), False

    def insert(self, db: Session, user_id: int, payload: Mapping[str, Any]) -> List[TrackedRecord]:
        """Add a row for ``user_id`` (see ``upsert``) and return the active list."""
        rows, _ = self.upsert(db, user_id, payload)
        return rows

    def soft_delete(self, db: Session, user_id: int, record_id: int) -> List[TrackedRecord]:
        """Hide one of the caller's rows. Deleting twice is a no-op."""
        with self._storage(db, "delete"):
            matched = self._owned(db, user_id, record_id, include_deleted=True).update(
                {self.model.deleted_flag: True}, synchronize_session="fetch"
            )

        if not matched:
            logger.info(f"delete on {self.resource.name} matched no rows for user {user_id} (record {record_id})")
        return self.list_active(db, user_id)

    def update(
        self,
        db: Session,
        user_id: int,
        record_id: Optional[int],
        payload: Mapping[str, Any]
    ) -> List[TrackedRecord]:
        """
        Overwrite payload fields of one of the caller's active rows.

        Accumulating fields are written as ``column = column + delta`` in the
        same UPDATE statement, so concurrent deltas for one user are not lost.
        ``record_id`` may be omitted for singleton categories.
        """
        assignments = self._assignments(self._payload(payload))
        self._write(db, user_id, record_id, assignments, "update")
        return self.list_active(db, user_id)

    def reset(self, db: Session, user_id: int, record_id: Optional[int] = None) -> List[TrackedRecord]:
        """Write the category's reset values onto the caller's row."""
        assignments = {getattr(self.model, name): value for name, value in self.resource.reset_values.items()}
        self._write(db, user_id, record_id, assignments, "reset")
        return self.list_active(db, user_id)
