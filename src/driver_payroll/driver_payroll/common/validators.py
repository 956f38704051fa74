from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_plain_field(value: str, field_name: str) -> str:
    """Non-empty text that can be stored as one comma-separated field."""
    value = require_non_empty(value, field_name)
    if "," in value or "\n" in value or "\r" in value:
        raise ValidationError(f"{field_name} must not contain commas or line breaks")
    return value
