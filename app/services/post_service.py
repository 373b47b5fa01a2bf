"""
Post service — CRUD for blog posts.
Depends on the PostPort only (Dependency Inversion).
"""

import logging

from app.domain.errors import PostNotFoundError, PostValidationError
from app.domain.models import PostCreate, PostRecord, PostUpdate, PostView, to_display
from app.ports.post_port import PostPort

logger = logging.getLogger(__name__)


class PostService:
    """Handles blog post operations and shapes store records for the API."""

    def __init__(self, db: PostPort) -> None:
        self._db = db

    async def list_posts(self) -> list[PostView]:
        rows = await self._db.list_posts()
        return [to_display(PostRecord(**row)) for row in rows]

    async def get_post(self, post_id: str) -> PostView:
        row = await self._db.get_post(post_id)
        if not row:
            raise PostNotFoundError(post_id)
        return to_display(PostRecord(**row))

    async def create_post(self, body: PostCreate) -> PostView:
        """Insert a new post and return its display view."""
        row = await self._db.create_post(body.to_store())
        logger.info(f"Created post {row['id']}")
        return to_display(PostRecord(**row))

    async def update_post(self, post_id: str, body: PostUpdate) -> PostView:
        """
        Replace title, content and author of an existing post.
        The path id and the body id must agree; id and created are preserved.
        """
        if post_id != body.id:
            raise PostValidationError(
                f"Request path id ({post_id}) and request body id ({body.id}) must match"
            )
        row = await self._db.update_post(post_id, body.to_store())
        if not row:
            raise PostNotFoundError(post_id)
        logger.info(f"Updated post {post_id}")
        return to_display(PostRecord(**row))

    async def delete_post(self, post_id: str) -> None:
        if not await self._db.delete_post(post_id):
            raise PostNotFoundError(post_id)
        logger.info(f"Deleted post {post_id}")
