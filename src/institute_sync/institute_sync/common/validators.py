from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_object(value: Any, message: str) -> dict:
    if not isinstance(value, dict):
        raise ValidationError(message)
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_list(payload: dict, key: str) -> list:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(f"'{key}' must be a list")
    return value


def optional_iso_date(value: Optional[str], field_name: str) -> Optional[str]:
    if not value:
        return None
    try:
        day = parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")
    # Canonical form so string comparison against stored dates is ordered.
    return day.isoformat()


def optional_positive_int(value: Optional[str], field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a positive integer")
    if number <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return number
