from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Post


class IPostRepository(ABC):
    """Post repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, post_id: UUID) -> Optional[Post]:
        """Get post by ID"""
        pass

    @abstractmethod
    async def get_with_author(self, post_id: UUID) -> Optional[Tuple[Post, str]]:
        """Get post by ID together with the author's username"""
        pass

    @abstractmethod
    async def list_latest(self, limit: int) -> List[Tuple[Post, str]]:
        """Get the newest posts with author usernames, newest first"""
        pass

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Create a new post"""
        pass

    @abstractmethod
    async def update(self, post: Post) -> Post:
        """Update existing post"""
        pass

    @abstractmethod
    async def delete(self, post: Post) -> None:
        """Delete a post row"""
        pass

    @abstractmethod
    async def adjust_likes(self, post_id: UUID, delta: int) -> int:
        """Add delta to the like counter of a post. Returns the new counter."""
        pass

    @abstractmethod
    async def decrement_likes(self, post_ids: List[UUID]) -> int:
        """Decrement the like counter of each post by one. Returns rows touched."""
        pass

    @abstractmethod
    async def list_ids_by_user(self, user_id: UUID) -> List[UUID]:
        """Get the IDs of every post owned by a user"""
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every post owned by a user. Returns count."""
        pass
