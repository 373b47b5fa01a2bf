"""
Abstract interface for the blog post record store.
"""

from abc import ABC, abstractmethod
from typing import Any


class PostPort(ABC):
    """Port for CRUD operations against the blog post collection.

    Records are plain dicts shaped like ``PostRecord``:
    ``{"id", "title", "content", "author": {"firstName", "lastName"}, "created"}``.
    """

    @abstractmethod
    async def list_posts(self) -> list[dict[str, Any]]:
        """Return every stored post, newest first."""
        ...

    @abstractmethod
    async def count_posts(self) -> int:
        ...

    @abstractmethod
    async def get_post(self, post_id: str) -> dict[str, Any] | None:
        """Fetch a single post, or None if no record has this id."""
        ...

    @abstractmethod
    async def create_post(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a post and return the stored record.

        Args:
            data: ``{"title", "content", "author"}``; the store assigns
                ``id`` and ``created``.
        """
        ...

    @abstractmethod
    async def create_posts(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Bulk insert, used for seeding."""
        ...

    @abstractmethod
    async def update_post(
        self, post_id: str, data: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Replace title/content/author in place. Returns None if not found."""
        ...

    @abstractmethod
    async def delete_post(self, post_id: str) -> bool:
        """Remove a post. Returns False if no record had this id."""
        ...

    @abstractmethod
    async def delete_all_posts(self) -> int:
        """Empty the collection and return how many records were removed."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection."""
        ...
