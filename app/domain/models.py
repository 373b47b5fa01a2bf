"""
Pydantic models for requests, responses, and stored blog posts.
Pure data — no I/O, no side effects.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _not_blank(value: str) -> str:
    # Kept as given; whitespace-only counts as missing
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


# ── Author ────────────────────────────────────────────────────


class Author(BaseModel):
    """Structured author as stored: ``{"firstName": ..., "lastName": ...}``."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: NonBlankStr = Field(..., alias="firstName")
    last_name: NonBlankStr = Field(..., alias="lastName")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


# ── Requests ──────────────────────────────────────────────────


class PostCreate(BaseModel):
    """Request body for POST /posts."""

    title: NonBlankStr
    content: NonBlankStr
    author: Author

    def to_store(self) -> dict[str, Any]:
        """Document written to the record store (id/created are assigned there)."""
        return {
            "title": self.title,
            "content": self.content,
            "author": self.author.model_dump(by_alias=True),
        }


class PostUpdate(PostCreate):
    """Request body for PUT /posts/{id}. Full replacement, no partial updates."""

    id: str = Field(..., min_length=1)


# ── Stored record ─────────────────────────────────────────────


class PostRecord(BaseModel):
    """A blog post as held by the record store."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str
    author: Author
    created: datetime


# ── Responses ─────────────────────────────────────────────────


class PostView(BaseModel):
    """API-facing shape of a post, author flattened to a single string."""

    id: str
    title: str
    content: str
    author: str
    created: datetime


def to_display(record: PostRecord) -> PostView:
    """Shape a stored record for the API."""
    return PostView(
        id=record.id,
        title=record.title,
        content=record.content,
        author=record.author.full_name,
        created=record.created,
    )
