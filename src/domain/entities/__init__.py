"""
StockTalk Domain Entities

Each entity in its own file.
"""

from .user import User
from .post import Post
from .post_like import PostLike
from .chat_message import ChatMessage

__all__ = [
    "User",
    "Post",
    "PostLike",
    "ChatMessage",
]
