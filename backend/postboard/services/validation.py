"""
Postboard Backend — Request Field Checks
==========================================

What:  Small helpers shared by the handlers to enforce required fields and
       bounds before any store call.
Why:   Every handler reports a missing field the same way:
       ValidationError("All fields are required") listing the missing names.
"""

from typing import Any, Mapping, Optional

from postboard.exceptions import ValidationError


ALL_FIELDS_REQUIRED = "All fields are required"


def _is_blank(value: Any) -> bool:
    # 0 is a value, not an absence; bounds checks reject it separately
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(fields: Mapping[str, Any]) -> None:
    """
    Raises ValidationError if any of `fields` is None or a blank string.

    Args:
        fields: field name → submitted value, in the order to report them
    """
    missing = [name for name, value in fields.items() if _is_blank(value)]
    if missing:
        raise ValidationError(
            message=ALL_FIELDS_REQUIRED,
            context={"missing": missing},
        )


def check_length(
    field: str,
    value: str,
    min_length: int,
    max_length: int,
) -> None:
    """Raises ValidationError unless min_length <= len(value) <= max_length."""
    if not min_length <= len(value) <= max_length:
        raise ValidationError(
            message=(
                f"{field.capitalize()} must be between {min_length} "
                f"and {max_length} characters"
            ),
            field=field,
        )


def check_range(
    field: str,
    value: Optional[int],
    minimum: int,
    maximum: int,
) -> None:
    """Raises ValidationError unless `value` is an int in [minimum, maximum]."""
    # bool is an int subclass; a JSON true is not an age
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(message=f"{field.capitalize()} must be a number", field=field)
    if not minimum <= value <= maximum:
        raise ValidationError(
            message=f"{field.capitalize()} must be between {minimum} and {maximum}",
            field=field,
        )


def normalize(value: str) -> str:
    """Trims and lowercases an identifier (email, username) before comparison or storage."""
    return value.strip().lower()
