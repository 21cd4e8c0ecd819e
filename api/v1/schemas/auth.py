from __future__ import annotations

from .common import CamelOut


class TokenOut(CamelOut):
    access_token: str
    token_type: str = "bearer"
    user_id: str
