from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, to_iso_date


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def require_iso_date(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return optional_iso_date(value, field_name)


def optional_iso_date(value: Optional[str], field_name: str) -> Optional[str]:
    """Normalize an optional YYYY-MM-DD value; blank means no filter."""
    value = optional_text(value)
    if value is None:
        return None
    try:
        return to_iso_date(parse_iso_date(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def require_date_order(start_date: Optional[str], end_date: Optional[str]) -> None:
    if start_date and end_date and start_date > end_date:
        raise ValidationError("start_date must not be after end_date")
