"""Collection adapter backed by SQLAlchemy, one row per record keyed by id."""
from __future__ import annotations

from typing import Callable, Iterable, Optional
import logging

from sqlalchemy import delete, func, select

from roster_api.db.models import RosterRecord
from roster_api.db.session import session_scope
from roster_api.repositories.locks import lock_for
from roster_api.repositories.records import Record, as_number

logger = logging.getLogger(__name__)


def _key(wanted) -> Optional[int]:
    number = as_number(wanted)
    return number if isinstance(number, int) else None


class SqlCollection:
    """Same operations as JsonCollection, each one a single keyed statement."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._lock = lock_for(f"sql:{name}")

    def _row(self, session, key: int) -> Optional[RosterRecord]:
        return session.get(RosterRecord, {"collection": self.name, "record_id": key})

    def read(self) -> list[Record]:
        with session_scope() as session:
            stmt = (
                select(RosterRecord.data)
                .where(RosterRecord.collection == self.name)
                .order_by(RosterRecord.record_id)
            )
            return [dict(data) for data in session.execute(stmt).scalars()]

    def get(self, wanted) -> Optional[Record]:
        key = _key(wanted)
        if key is None:
            return None
        with session_scope() as session:
            row = self._row(session, key)
            return dict(row.data) if row is not None else None

    def insert(self, values: dict) -> Record:
        with self._lock, session_scope() as session:
            highest = session.execute(
                select(func.max(RosterRecord.record_id)).where(RosterRecord.collection == self.name)
            ).scalar()
            record_id = (highest or 0) + 1
            record = {"id": record_id, **values}
            session.add(RosterRecord(collection=self.name, record_id=record_id, data=record))
        return record

    def update(self, wanted, prepare: Callable[[Record], dict]) -> Optional[Record]:
        key = _key(wanted)
        if key is None:
            return None
        with self._lock, session_scope() as session:
            row = self._row(session, key)
            if row is None:
                return None
            current = dict(row.data)
            merged = {**current, **prepare(current)}
            # reassign so the JSON column is flagged dirty
            row.data = merged
        return merged

    def delete(self, wanted) -> bool:
        key = _key(wanted)
        if key is None:
            return False
        with self._lock, session_scope() as session:
            result = session.execute(
                delete(RosterRecord).where(
                    RosterRecord.collection == self.name,
                    RosterRecord.record_id == key,
                )
            )
            return result.rowcount > 0

    def replace_all(self, records: Iterable[Record]) -> int:
        """Load a whole collection (migration); records without an integer id are skipped."""
        rows = []
        for record in records:
            key = _key(record.get("id"))
            if key is None:
                logger.warning("Skipping %s record without an integer id: %r", self.name, record)
                continue
            rows.append(RosterRecord(collection=self.name, record_id=key, data={**record, "id": key}))
        with self._lock, session_scope() as session:
            session.execute(delete(RosterRecord).where(RosterRecord.collection == self.name))
            session.add_all(rows)
        logger.info("Loaded %d %s rows", len(rows), self.name)
        return len(rows)
