"""Posts API: list, get, title search, create, update, delete. Requires Authorization."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from app.api.v1.dependencies import (
    get_current_account,
    get_post_query_service,
    get_post_service,
)
from app.application.dtos.account import AccountResult
from app.application.dtos.post import PostCreate, PostUpdate
from app.application.services.post_service import PostService
from app.core.limiter import limit_writes
from app.schemas.post import PostCreateRequest, PostResponse, PostUpdateRequest

router = APIRouter()


@router.get("", response_model=list[PostResponse])
async def list_posts(
    current_account: Annotated[AccountResult, Depends(get_current_account)],
    post_service: Annotated[PostService, Depends(get_post_query_service)],
    skip: int = 0,
    limit: int = 100,
):
    """List posts, newest first."""
    posts = await post_service.list_posts(skip=skip, limit=limit)
    return [PostResponse.model_validate(p) for p in posts]


@router.get("/title/{title}", response_model=list[PostResponse])
async def search_posts_by_title(
    title: str,
    current_account: Annotated[AccountResult, Depends(get_current_account)],
    post_service: Annotated[PostService, Depends(get_post_query_service)],
):
    """Posts whose title contains title, ignoring case. Empty list when none match."""
    posts = await post_service.search_by_title(title)
    return [PostResponse.model_validate(p) for p in posts]


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int,
    current_account: Annotated[AccountResult, Depends(get_current_account)],
    post_service: Annotated[PostService, Depends(get_post_query_service)],
):
    """Get post by id; 404 when not found."""
    post = await post_service.get_post(post_id)
    return PostResponse.model_validate(post)


@router.post("", response_model=PostResponse, status_code=201)
@limit_writes
async def create_post(
    request: Request,
    body: PostCreateRequest,
    current_account: Annotated[AccountResult, Depends(get_current_account)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Create a post authored by the current account."""
    post = await post_service.create_post(
        PostCreate(title=body.title, body=body.body),
        author_id=current_account.id,
    )
    return PostResponse.model_validate(post)


@router.put("", response_model=PostResponse)
@limit_writes
async def update_post(
    request: Request,
    body: PostUpdateRequest,
    current_account: Annotated[AccountResult, Depends(get_current_account)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Replace title and body of an own post; 404 when unknown, 403 when not the author."""
    post = await post_service.update_post(
        PostUpdate(id=body.id, title=body.title, body=body.body),
        account_id=current_account.id,
    )
    return PostResponse.model_validate(post)


@router.delete("/{post_id}", status_code=204)
@limit_writes
async def delete_post(
    request: Request,
    post_id: int,
    current_account: Annotated[AccountResult, Depends(get_current_account)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Delete an own post; 404 when unknown, 403 when not the author."""
    await post_service.delete_post(post_id, account_id=current_account.id)
    return Response(status_code=204)
