"""
Movie payload validation.

Wraps the pydantic schemas in a tagged result so callers never deal with
exceptions: every failing field is reported, not just the first one.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from movies_api.api.models.movie import MovieCreate, MovieUpdate


@dataclass
class ValidationResult:
    """Outcome of validating a request body."""

    success: bool
    data: Optional[dict[str, Any]] = None
    errors: list[dict[str, Any]] = field(default_factory=list)


def format_errors(errors) -> list[dict[str, Any]]:
    """Turn pydantic error dicts into ``{path, message, code}`` entries."""
    return [
        {
            "path": list(err.get("loc", ())),
            "message": err.get("msg", ""),
            "code": err.get("type", ""),
        }
        for err in errors
    ]


def _validate(schema: type[BaseModel], payload: Any, partial: bool) -> ValidationResult:
    try:
        movie = schema.model_validate(payload)
    except ValidationError as e:
        return ValidationResult(success=False, errors=format_errors(e.errors()))
    return ValidationResult(success=True, data=movie.model_dump(exclude_unset=partial))


def validate_full(payload: Any) -> ValidationResult:
    """Validate a create payload: every field except ``rate`` is required."""
    return _validate(MovieCreate, payload, partial=False)


def validate_partial(payload: Any) -> ValidationResult:
    """Validate an update payload: only the fields present are checked and returned."""
    return _validate(MovieUpdate, payload, partial=True)
