"""
Concrete implementation of PostPort using the Supabase Python client.

Expected table (name configurable, default ``blog_posts``):

    create table blog_posts (
        id      uuid primary key default gen_random_uuid(),
        title   text not null,
        content text not null,
        author  jsonb not null,
        created timestamptz not null default now()
    );
"""

import contextlib
import logging
from typing import Any, Iterator
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from app.domain.errors import StoreError
from app.ports.post_port import PostPort

logger = logging.getLogger(__name__)

# PostgREST refuses unfiltered deletes, so "delete all" filters on id != nil
_NIL_UUID = "00000000-0000-0000-0000-000000000000"


def _is_uuid(value: str) -> bool:
    try:
        UUID(value)
    except ValueError:
        return False
    return True


@contextlib.contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except (APIError, httpx.HTTPError) as exc:
        logger.error(f"Store operation '{operation}' failed: {type(exc).__name__}: {exc}")
        raise StoreError(f"Record store unavailable during {operation}") from exc


class SupabasePostAdapter(PostPort):
    """All blog post I/O goes through the Supabase REST client."""

    def __init__(self, client: Client, table: str = "blog_posts") -> None:
        self._client = client
        self._table = table

    @classmethod
    def connect(
        cls, url: str, key: str, table: str = "blog_posts"
    ) -> "SupabasePostAdapter":
        """Create a client for the given project URL and wrap it."""
        logger.info(f"Connecting to record store at {url} (table={table})")
        return cls(create_client(url, key), table=table)

    def _posts(self):
        return self._client.table(self._table)

    async def list_posts(self) -> list[dict[str, Any]]:
        with _store_errors("list"):
            result = self._posts().select("*").order("created", desc=True).execute()
        return result.data or []

    async def count_posts(self) -> int:
        with _store_errors("count"):
            result = self._posts().select("id", count="exact").execute()
        return result.count if result.count is not None else len(result.data or [])

    async def get_post(self, post_id: str) -> dict[str, Any] | None:
        # A malformed id can never match; PostgREST would reject it with 22P02
        if not _is_uuid(post_id):
            return None
        with _store_errors("get"):
            result = (
                self._posts()
                .select("*")
                .eq("id", post_id)
                .maybe_single()
                .execute()
            )
        return result.data if result else None

    async def create_post(self, data: dict[str, Any]) -> dict[str, Any]:
        with _store_errors("create"):
            result = self._posts().insert(data).execute()
        return result.data[0]

    async def create_posts(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        if not rows:
            return []
        with _store_errors("bulk create"):
            result = self._posts().insert(rows).execute()
        return result.data or []

    async def update_post(
        self, post_id: str, data: dict[str, Any]
    ) -> dict[str, Any] | None:
        if not _is_uuid(post_id):
            return None
        with _store_errors("update"):
            result = self._posts().update(data).eq("id", post_id).execute()
        return result.data[0] if result.data else None

    async def delete_post(self, post_id: str) -> bool:
        if not _is_uuid(post_id):
            return False
        with _store_errors("delete"):
            result = self._posts().delete().eq("id", post_id).execute()
        return bool(result.data)

    async def delete_all_posts(self) -> int:
        with _store_errors("delete all"):
            result = self._posts().delete().neq("id", _NIL_UUID).execute()
        return len(result.data or [])

    async def close(self) -> None:
        self._client.postgrest.aclose()
        logger.info("Record store connection closed")
