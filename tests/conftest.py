from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable

import pytest
from fastapi.testclient import TestClient

from main import create_app
from services.db import Database


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'fitlife.db'}"


@pytest.fixture
def client(db_url: str):
    with TestClient(create_app(db_url)) as c:
        yield c


@pytest.fixture
def with_db(db_url: str) -> Callable[[Callable[[Database], Awaitable[Any]]], Any]:
    """Run `fn(db)` on a freshly connected database inside its own event loop."""

    def _run(fn: Callable[[Database], Awaitable[Any]]) -> Any:
        async def _go() -> Any:
            db = Database(db_url)
            await db.connect()
            try:
                return await fn(db)
            finally:
                await db.close()

        return asyncio.run(_go())

    return _run


@pytest.fixture
def signup(client: TestClient) -> Callable[..., dict[str, str]]:
    """Register + log in; returns the Authorization header."""

    def _signup(email: str, password: str = "s3cret-pass") -> dict[str, str]:
        r = client.post(
            "/api/v1/auth/register",
            json={"name": email.split("@")[0].title(), "email": email, "password": password},
        )
        assert r.status_code == 201, r.text
        r = client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert r.status_code == 200, r.text
        return {"Authorization": f"Bearer {r.json()['accessToken']}"}

    return _signup
