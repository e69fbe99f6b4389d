"""Payload field checks shared by the team and player services."""
from __future__ import annotations

from typing import Any

from roster_api.core.errors import ValidationError


def is_filled(value: Any) -> bool:
    """Presence check: None and blank strings count as missing."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def int_field(payload: dict, field: str) -> int:
    """Integer value of a numeric field; integral strings and floats are accepted."""
    value = payload.get(field)
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            number = None
        if number is not None and number.is_integer():
            return int(number)
    raise ValidationError(f"{field} must be an integer")
