"""Shared test fixtures, an in-memory record store, and factory functions."""

import copy
import uuid
from collections.abc import AsyncIterator
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.application import create_app
from app.config import Settings
from app.ports.post_port import PostPort
from app.seed import PostFactory, seed_posts

SEED_COUNT = 10


class InMemoryPostStore(PostPort):
    """Dict-backed PostPort. Assigns uuid ids and strictly increasing timestamps."""

    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self.closed = False
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _now(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    async def list_posts(self) -> list[dict[str, Any]]:
        rows = sorted(self.rows.values(), key=lambda r: r["created"], reverse=True)
        return copy.deepcopy(rows)

    async def count_posts(self) -> int:
        return len(self.rows)

    async def get_post(self, post_id: str) -> dict[str, Any] | None:
        row = self.rows.get(post_id)
        return copy.deepcopy(row) if row else None

    async def create_post(self, data: dict[str, Any]) -> dict[str, Any]:
        row = {**copy.deepcopy(data), "id": str(uuid.uuid4()), "created": self._now()}
        self.rows[row["id"]] = row
        return copy.deepcopy(row)

    async def create_posts(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [await self.create_post(r) for r in rows]

    async def update_post(
        self, post_id: str, data: dict[str, Any]
    ) -> dict[str, Any] | None:
        if post_id not in self.rows:
            return None
        self.rows[post_id].update(copy.deepcopy(data))
        return copy.deepcopy(self.rows[post_id])

    async def delete_post(self, post_id: str) -> bool:
        return self.rows.pop(post_id, None) is not None

    async def delete_all_posts(self) -> int:
        removed = len(self.rows)
        self.rows.clear()
        return removed

    async def close(self) -> None:
        self.closed = True


def make_settings(**overrides: Any) -> Settings:
    """Settings isolated from the developer's .env file."""
    defaults: dict[str, Any] = {
        "supabase_url": "https://project.supabase.co",
        "supabase_service_role_key": "service-role-key",
    }
    return Settings(_env_file=None, **{**defaults, **overrides})


def make_post(title: str = "United Stand", first: str = "Mark", last: str = "Redford",
              content: str = "Very happy with the performance") -> dict[str, Any]:
    return {
        "title": title,
        "content": content,
        "author": {"firstName": first, "lastName": last},
    }


@pytest.fixture
def store() -> InMemoryPostStore:
    return InMemoryPostStore()


@pytest.fixture
async def seeded_store(store: InMemoryPostStore) -> AsyncIterator[InMemoryPostStore]:
    """Seed random posts before the test and empty the store afterwards."""
    await seed_posts(store, count=SEED_COUNT, factory=PostFactory(seed=1234))
    yield store
    await store.delete_all_posts()


@pytest.fixture
def app(seeded_store: InMemoryPostStore) -> FastAPI:
    return create_app(store=seeded_store, settings=make_settings())


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
