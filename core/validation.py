"""
Fail-fast payload validation.

Every resource has a pydantic schema in `core.models`; `validate_payload`
runs it and reports only the first violated constraint as `InvalidInput`.
"""

from __future__ import annotations

import math
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.errors import InvalidInput

M = TypeVar("M", bound=BaseModel)

# never taken from the client – the server assigns these
SERVER_FIELDS = frozenset({"id", "_id", "userId", "user_id", "date", "createdAt", "created_at"})


def first_error_message(exc: ValidationError) -> str:
    err = exc.errors()[0]
    field = ".".join(str(p) for p in err.get("loc", ()))
    msg = err.get("msg", "Invalid value")
    return f"{field}: {msg}" if field else msg


def validate_payload(schema: type[M], payload: Any) -> M:
    if not isinstance(payload, dict):
        raise InvalidInput("Request body must be a JSON object")
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise InvalidInput(first_error_message(exc)) from None


def _finite(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, dict):
        return all(_finite(v) for v in value.values())
    if isinstance(value, list):
        return all(_finite(v) for v in value)
    return True


def passthrough_fields(model: BaseModel) -> dict[str, Any]:
    """Unknown keys the client sent, minus anything the server owns."""
    extra = model.model_extra or {}
    kept = {k: v for k, v in extra.items() if k not in SERVER_FIELDS}
    for key, value in kept.items():
        # stored as JSON, which has no Infinity or NaN
        if not _finite(value):
            raise InvalidInput(f"{key}: Input should be a finite number")
    return kept
