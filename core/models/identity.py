from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """All the services know about the caller."""

    user_id: str
