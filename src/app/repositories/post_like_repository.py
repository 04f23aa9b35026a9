from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import PostLike


class IPostLikeRepository(ABC):
    """PostLike repository interface - application layer"""

    @abstractmethod
    async def get(self, user_id: UUID, post_id: UUID) -> Optional[PostLike]:
        """Get the like relation between a user and a post"""
        pass

    @abstractmethod
    async def create(self, like: PostLike) -> PostLike:
        """Create a like relation"""
        pass

    @abstractmethod
    async def delete(self, user_id: UUID, post_id: UUID) -> int:
        """Delete the like relation between a user and a post. Returns count."""
        pass

    @abstractmethod
    async def list_post_ids_by_user(self, user_id: UUID) -> List[UUID]:
        """Get the IDs of every post a user has liked"""
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every like made by a user. Returns count."""
        pass

    @abstractmethod
    async def delete_by_posts(self, post_ids: List[UUID]) -> int:
        """Delete every like on the given posts. Returns count."""
        pass
