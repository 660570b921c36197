"""Validation Translator — pydantic failures to field-level error lists.

Invariants:
    - One FieldError per failing field, in the order pydantic reports them
    - Messages come from the validator that failed (ValueError text), not
      pydantic's generic "Value error, ..." wrapper

Design Decisions:
    - Same field/message shape as the API-wide validation handler details
"""

from pydantic import ValidationError

from bookshelf.core.domain_types import FieldError


def translate_validation_error(exc: ValidationError) -> list[FieldError]:
    """Flatten a pydantic ValidationError into FieldError descriptors."""
    field_errors: list[FieldError] = []
    seen: set[str] = set()
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"]) or "__root__"
        if field in seen:
            continue
        seen.add(field)
        field_errors.append(FieldError(field=field, message=_message(error)))
    return field_errors


def _message(error: dict) -> str:
    cause = (error.get("ctx") or {}).get("error")
    if isinstance(cause, ValueError):
        return str(cause)
    return error["msg"]
