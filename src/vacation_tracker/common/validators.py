from __future__ import annotations

import re
from datetime import date
from typing import Any, Optional

from ..core.exceptions import ValidationError

# Control characters other than tab, LF and CR; spreadsheets and mail headers reject them
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def _check_text(text: str, field_name: str, max_length: Optional[int]) -> str:
    if _CONTROL_CHARS_RE.search(text):
        raise ValidationError(f"{field_name} contains control characters")
    if max_length is not None and len(text) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return text


def require_non_empty(value: Any, field_name: str, *, max_length: Optional[int] = None) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required and cannot be empty")
    return _check_text(value.strip(), field_name, max_length)


def optional_text(value: Any, field_name: str, *, max_length: Optional[int] = None) -> Optional[str]:
    """Trimmed text or None for missing/blank input."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    text = value.strip()
    if not text:
        return None
    return _check_text(text, field_name, max_length)


def require_int_in_range(value: Any, field_name: str, low: int, high: int) -> int:
    # bool is an int subclass; True must not pass as an allowance of 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be a whole number")
    if value < low or value > high:
        raise ValidationError(f"{field_name} must be between {low} and {high}")
    return value


def require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be a whole number")
    if value < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return value


def require_date_order(start: date, end: date) -> None:
    if end < start:
        raise ValidationError("end_date must be on/after start_date")


def require_max_span(start: date, end: date, max_days: int) -> None:
    if (end - start).days + 1 > max_days:
        raise ValidationError(f"Date range cannot span more than {max_days} days")
