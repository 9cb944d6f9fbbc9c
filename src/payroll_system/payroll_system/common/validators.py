from __future__ import annotations

import math

from ..core.constants import (
    MAX_POSITIVE_INT,
    MSG_EMPTY_INPUT,
    MSG_INVALID_NAME,
    MSG_INVALID_NUMBER,
    MSG_INVALID_POSITIVE_INT,
)
from ..core.exceptions import ValidationError


def require_non_empty(value: str) -> str:
    # Only the empty string is rejected; surrounding spaces are kept.
    if not value:
        raise ValidationError(MSG_EMPTY_INPUT)
    return value


def is_name_valid(name: str) -> bool:
    return all(ch.isalpha() or ch.isspace() for ch in name)


def require_name(value: str) -> str:
    """Letters and whitespace only, and at least one letter."""
    require_non_empty(value)
    if not value.strip() or not is_name_valid(value):
        raise ValidationError(MSG_INVALID_NAME)
    return value


def _is_plain_number(text: str) -> bool:
    # int()/float() also take digit separators and non-ASCII digits.
    return text.isascii() and "_" not in text


def parse_non_negative_float(text: str) -> float:
    text = text.strip()
    if not _is_plain_number(text):
        raise ValidationError(MSG_INVALID_NUMBER)
    try:
        value = float(text)
    except ValueError:
        raise ValidationError(MSG_INVALID_NUMBER) from None
    if not math.isfinite(value) or value < 0:
        raise ValidationError(MSG_INVALID_NUMBER)
    return value


def parse_positive_int(text: str) -> int:
    """Whole number in 1..MAX_POSITIVE_INT."""
    text = text.strip()
    if not _is_plain_number(text):
        raise ValidationError(MSG_INVALID_POSITIVE_INT)
    try:
        value = int(text)
    except ValueError:
        raise ValidationError(MSG_INVALID_POSITIVE_INT) from None
    if value <= 0 or value > MAX_POSITIVE_INT:
        raise ValidationError(MSG_INVALID_POSITIVE_INT)
    return value
