"""
Dependency Injection wiring.

The store handle is created once per application (see ``app.application``)
and kept on ``app.state``; handlers receive it through these dependencies
instead of reaching for a module-level client.
"""

from fastapi import Depends, Request

from app.ports.post_port import PostPort
from app.services.post_service import PostService


def get_post_store(request: Request) -> PostPort:
    """Inject the record store adapter bound to this application."""
    return request.app.state.post_store


def get_post_service(db: PostPort = Depends(get_post_store)) -> PostService:
    """Injects the store adapter into the post domain service."""
    return PostService(db=db)
