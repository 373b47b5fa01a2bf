"""
Blog post endpoints: list, fetch, create, update, delete.
All logic delegated to PostService.
"""

from fastapi import APIRouter, Depends, Response, status

from app.dependencies import get_post_service
from app.domain.models import PostCreate, PostUpdate, PostView
from app.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.get("", response_model=list[PostView])
async def list_posts(svc: PostService = Depends(get_post_service)):
    """List every blog post."""
    return await svc.list_posts()


@router.get("/{post_id}", response_model=PostView)
async def get_post(post_id: str, svc: PostService = Depends(get_post_service)):
    return await svc.get_post(post_id)


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(body: PostCreate, svc: PostService = Depends(get_post_service)):
    """Create a new blog post. The store assigns id and created."""
    return await svc.create_post(body)


# PUT answers 201 on success.
@router.put("/{post_id}", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def update_post(
    post_id: str,
    body: PostUpdate,
    svc: PostService = Depends(get_post_service),
):
    """Replace title, content and author of an existing post."""
    return await svc.update_post(post_id, body)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str, svc: PostService = Depends(get_post_service)):
    await svc.delete_post(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
