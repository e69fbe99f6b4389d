"""Helpers shared by every backend to reason about stored records."""
from __future__ import annotations

import math
from typing import Any, Iterable, Optional

Record = dict


def as_number(value: Any) -> Optional[int | float]:
    """Numeric view of a stored or requested identifier, None when it has none."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value) if value.is_integer() else value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return as_number(float(text))
        except ValueError:
            return None
    return None


def next_id(records: Iterable[Record]) -> int:
    """1 + the largest numeric id present, or 1 for an empty collection."""
    highest: int | float = 0
    for record in records:
        current = as_number(record.get("id"))
        if current is not None and current > highest:
            highest = current
    return int(highest) + 1


def find_index(records: list[Record], wanted: Any, field: str = "id") -> Optional[int]:
    target = as_number(wanted)
    if target is None:
        return None
    for idx, record in enumerate(records):
        if as_number(record.get(field)) == target:
            return idx
    return None


def find_record(records: list[Record], wanted: Any, field: str = "id") -> Optional[Record]:
    idx = find_index(records, wanted, field)
    return records[idx] if idx is not None else None
