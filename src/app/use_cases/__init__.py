"""
Use Cases

Organized into domain folders:
- auth/: Signup, login, account deletion
- posts/: Posts and likes
- chats/: Chat room
"""

from .auth import DeleteAccountUseCase, LoginUseCase, SignupUseCase
from .posts import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetLikeStatusUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    ToggleLikeUseCase,
    UpdatePostUseCase,
)
from .chats import CreateChatUseCase, ListChatsUseCase

__all__ = [
    # Auth
    "SignupUseCase",
    "LoginUseCase",
    "DeleteAccountUseCase",
    # Posts
    "ListPostsUseCase",
    "GetPostUseCase",
    "CreatePostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    "ToggleLikeUseCase",
    "GetLikeStatusUseCase",
    # Chats
    "CreateChatUseCase",
    "ListChatsUseCase",
]
