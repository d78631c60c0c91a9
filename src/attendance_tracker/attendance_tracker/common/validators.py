from __future__ import annotations

import re
from typing import Optional

from ..core.constants import MAX_STORED_INT
from ..core.exceptions import ValidationError

INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be blank")
    return value.strip()


def require_positive(value: int, field_name: str) -> int:
    if value is None or int(value) <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return int(value)


def parse_non_negative_int(text: Optional[str]) -> int:
    """Parse ``text`` as a plain decimal integer in ``0..MAX_STORED_INT``.

    Only ASCII digits with an optional sign are accepted; ``int()`` alone would
    also take underscores and non-ASCII digits.
    """
    if text is None:
        raise ValidationError("Missing number")
    stripped = text.strip()
    if not INT_PATTERN.fullmatch(stripped):
        raise ValidationError(f"Not a number: {text!r}")
    value = int(stripped)
    if value < 0:
        raise ValidationError(f"Negative number: {text!r}")
    if value > MAX_STORED_INT:
        raise ValidationError(f"Number too large: {text!r}")
    return value


def parse_salary(text: Optional[str], fallback: int) -> int:
    """Salary edits never clear a value: unparseable text keeps ``fallback``."""
    try:
        return parse_non_negative_int(text)
    except ValidationError:
        return fallback


def digits_only(text: Optional[str]) -> str:
    return "".join(ch for ch in (text or "") if "0" <= ch <= "9")
