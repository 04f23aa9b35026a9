from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.posts import (
    CreatePostUseCase,
    DeletePostResponse,
    DeletePostUseCase,
    GetLikeStatusUseCase,
    GetPostUseCase,
    LikeStatusResponse,
    LikeToggleResponse,
    ListPostsUseCase,
    PostCommand,
    PostListResponse,
    PostResponse,
    ToggleLikeUseCase,
    UpdatePostUseCase,
)
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/posts", tags=["Posts"])

_STATUS_BY_CODE = {
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "POST_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "LIKE_CONFLICT": status.HTTP_409_CONFLICT,
}


def _raise_for(error):
    status_code = _STATUS_BY_CODE.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)


async def _json_object(request: Request) -> Dict[str, Any]:
    """
    Request body as a JSON object, or an empty one when the body is missing,
    not JSON or not an object. Field checks are left to the use case, which
    runs them after the ownership check.
    """
    try:
        payload = await request.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


class PostRequest(BaseModel):
    """Post HTTP request payload"""

    title: Optional[str] = None
    content: Optional[str] = None


@router.get("", status_code=status.HTTP_200_OK, response_model=PostListResponse)
async def list_posts(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Latest 100 posts, newest first"""
    result = await ListPostsUseCase(uow).execute()
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get("/{post_id}", status_code=status.HTTP_200_OK, response_model=PostResponse)
async def get_post(post_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Fetch One Post

    Raises:
        - 404 Not Found: Post does not exist
    """
    result = await GetPostUseCase(uow).execute(post_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PostResponse)
async def create_post(
    request: PostRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Post

    Raises:
        - 400 Bad Request: Missing title/content or title over 255 chars
        - 401 / 403: Missing or invalid token
        - 404 Not Found: Token belongs to a deleted account
    """
    command = PostCommand(title=request.title, content=request.content)
    result = await CreatePostUseCase(uow).execute(user_id, command)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.put(
    "/{post_id}",
    status_code=status.HTTP_200_OK,
    response_model=PostResponse,
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": PostRequest.model_json_schema()}}
        }
    },
)
async def update_post(
    post_id: UUID,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Own Post

    Raises:
        - 400 Bad Request: Invalid title/content
        - 401 / 403: Missing or invalid token
        - 403 Forbidden: Post belongs to another user
        - 404 Not Found: Post does not exist
    """
    payload = await _json_object(request)
    command = PostCommand(title=payload.get("title"), content=payload.get("content"))
    result = await UpdatePostUseCase(uow).execute(user_id, post_id, command)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.delete("/{post_id}", status_code=status.HTTP_200_OK, response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Own Post

    Raises:
        - 401 / 403: Missing or invalid token
        - 403 Forbidden: Post belongs to another user
        - 404 Not Found: Post does not exist
    """
    result = await DeletePostUseCase(uow).execute(user_id, post_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.post("/{post_id}/like", status_code=status.HTTP_200_OK, response_model=LikeToggleResponse)
async def toggle_like(
    post_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Toggle Like

    Likes the post if the user has not liked it yet, otherwise removes the
    like. Returns the new state and like counter.

    Raises:
        - 401 / 403: Missing or invalid token
        - 404 Not Found: Post does not exist
        - 409 Conflict: Concurrent toggle on the same post by the same user
    """
    result = await ToggleLikeUseCase(uow).execute(user_id, post_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value


@router.get(
    "/{post_id}/like-status", status_code=status.HTTP_200_OK, response_model=LikeStatusResponse
)
async def like_status(
    post_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Whether the authenticated user likes the post"""
    result = await GetLikeStatusUseCase(uow).execute(user_id, post_id)
    if result.is_err():
        _raise_for(result.error)
    return result.value
