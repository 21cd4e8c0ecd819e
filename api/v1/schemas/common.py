from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelOut(BaseModel):
    """Outbound shape: snake_case in Python, camelCase in JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Created(CamelOut):
    id: str
    message: str


class Message(CamelOut):
    message: str


class ErrorOut(BaseModel):
    error: str
