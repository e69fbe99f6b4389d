"""
JSON-file persistence for record collections.

Each collection is a single file holding a JSON array of objects. Reads parse
the whole file and mutations rewrite it entirely, serialized per file by an
in-process lock so concurrent requests cannot lose each other's updates.
"""

from __future__ import annotations

from contextlib import contextmanager, suppress
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional
import json
import logging
import os
import tempfile

from roster_api.core.errors import CorruptDataError
from roster_api.repositories.locks import lock_for
from roster_api.repositories.records import Record, as_number, find_index, find_record, next_id

__all__ = ["load", "persist", "next_id", "JsonCollection"]

logger = logging.getLogger(__name__)


def load(path: Path) -> list[Record]:
    """Read a whole collection; a missing, empty or blank file is an empty one."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Collection file %s does not exist yet", path)
        return []
    if not raw.strip():
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.error("Collection file %s is not valid JSON: %s", path, exc)
        raise CorruptDataError(f"Stored data for '{path.stem}' is corrupt") from exc
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        logger.error("Collection file %s does not hold a JSON array of objects", path)
        raise CorruptDataError(f"Stored data for '{path.stem}' is corrupt")
    return data


def persist(path: Path, records: Iterable[Record]) -> None:
    """Overwrite the collection file with the full, 2-space indented array."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(list(records), ensure_ascii=False, indent=2)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        os.replace(tmp_name, path)
    except BaseException:
        with suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise
    logger.debug("Persisted %s (%d bytes)", path, len(payload))


class JsonCollection:
    """Single owner of one collection file."""

    def __init__(self, path: Path, name: str | None = None) -> None:
        self.path = Path(path)
        self.name = name or self.path.stem
        self._lock = lock_for(str(self.path.resolve()))

    def read(self) -> list[Record]:
        return load(self.path)

    @contextmanager
    def mutate(self) -> Iterator[list[Record]]:
        """Load, hand out the list for in-place changes, persist on clean exit.

        Raising inside the block leaves the file untouched.
        """
        with self._lock:
            records = load(self.path)
            yield records
            persist(self.path, records)

    def get(self, wanted) -> Optional[Record]:
        return find_record(self.read(), wanted)

    def insert(self, values: dict) -> Record:
        with self.mutate() as records:
            record = {"id": next_id(records), **values}
            records.append(record)
        return record

    def update(self, wanted, prepare: Callable[[Record], dict]) -> Optional[Record]:
        with self._lock:
            records = load(self.path)
            idx = find_index(records, wanted)
            if idx is None:
                return None
            records[idx].update(prepare(records[idx]))
            persist(self.path, records)
            return records[idx]

    def delete(self, wanted) -> bool:
        target = as_number(wanted)
        with self._lock:
            records = load(self.path)
            remaining = [r for r in records if target is None or as_number(r.get("id")) != target]
            if len(remaining) == len(records):
                return False
            persist(self.path, remaining)
            return True
