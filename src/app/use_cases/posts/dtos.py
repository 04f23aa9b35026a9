"""
Post Use Case DTOs (Data Transfer Objects)

All Command and Response classes for posts and likes.
"""

from datetime import datetime
from typing import Any, List, Optional
from pydantic import BaseModel

from src.domain.entities import Post


# ============================================================================
# Command DTOs
# ============================================================================


class PostCommand(BaseModel):
    """
    Title and content for creating or updating a post

    Values are carried as the client sent them; validate_post rejects
    anything that is not a non-empty string.
    """

    title: Any = None
    content: Any = None


# ============================================================================
# Response DTOs
# ============================================================================


class PostInfo(BaseModel):
    """Post as returned to clients"""

    id: str
    user_id: str
    username: str
    title: str
    content: str
    likes: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, post: Post, username: str) -> "PostInfo":
        return cls(
            id=str(post.id),
            user_id=str(post.user_id),
            username=username,
            title=post.title,
            content=post.content,
            likes=post.likes,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostListResponse(BaseModel):
    success: bool = True
    posts: List[PostInfo]


class PostResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    post: PostInfo


class DeletePostResponse(BaseModel):
    success: bool = True
    message: str


class LikeToggleResponse(BaseModel):
    """Like state after a toggle, with the post's updated counter"""

    success: bool = True
    liked: bool
    likes: int


class LikeStatusResponse(BaseModel):
    success: bool = True
    liked: bool
