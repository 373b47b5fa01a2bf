"""
Fake blog post generation for seeding a store (tests, local development).
"""

import logging
from typing import Any

from faker import Faker

from app.ports.post_port import PostPort

logger = logging.getLogger(__name__)


class PostFactory:
    """Builds random post documents shaped like a POST /posts body."""

    def __init__(self, faker: Faker | None = None, seed: int | None = None) -> None:
        self._faker = faker or Faker()
        if seed is not None:
            self._faker.seed_instance(seed)

    def build(self) -> dict[str, Any]:
        return {
            "title": self._faker.sentence(),
            "content": self._faker.text(),
            "author": {
                "firstName": self._faker.first_name(),
                "lastName": self._faker.last_name(),
            },
        }

    def build_many(self, count: int) -> list[dict[str, Any]]:
        return [self.build() for _ in range(count)]


async def seed_posts(
    db: PostPort, count: int = 10, factory: PostFactory | None = None
) -> list[dict[str, Any]]:
    """Insert ``count`` fake posts and return the stored records."""
    factory = factory or PostFactory()
    logger.info(f"Seeding {count} blog posts")
    return await db.create_posts(factory.build_many(count))
