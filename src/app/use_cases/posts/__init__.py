"""
Post Use Cases

Post CRUD and like toggling.
"""

from .list_posts_use_case import GetPostUseCase, ListPostsUseCase
from .create_post_use_case import CreatePostUseCase
from .update_post_use_case import UpdatePostUseCase
from .delete_post_use_case import DeletePostUseCase
from .toggle_like_use_case import GetLikeStatusUseCase, ToggleLikeUseCase
from .dtos import (
    DeletePostResponse,
    LikeStatusResponse,
    LikeToggleResponse,
    PostCommand,
    PostInfo,
    PostListResponse,
    PostResponse,
)

__all__ = [
    # Use Cases
    "ListPostsUseCase",
    "GetPostUseCase",
    "CreatePostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "ToggleLikeUseCase",
    "GetLikeStatusUseCase",
    # DTOs - Commands
    "PostCommand",
    # DTOs - Responses
    "PostInfo",
    "PostListResponse",
    "PostResponse",
    "DeletePostResponse",
    "LikeToggleResponse",
    "LikeStatusResponse",
]
