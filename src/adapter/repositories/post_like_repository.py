from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.post_like_repository import IPostLikeRepository
from src.domain.entities import PostLike


class PostLikeRepository(IPostLikeRepository):
    """PostLike repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: UUID, post_id: UUID) -> Optional[PostLike]:
        """Get the like relation between a user and a post"""
        stmt = select(PostLike).where(
            PostLike.user_id == user_id, PostLike.post_id == post_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, like: PostLike) -> PostLike:
        """Create a like relation; IntegrityError if it already exists"""
        self.session.add(like)
        await self.session.flush()
        return like

    async def delete(self, user_id: UUID, post_id: UUID) -> int:
        """Delete the like relation between a user and a post. Returns count."""
        stmt = delete(PostLike).where(
            PostLike.user_id == user_id, PostLike.post_id == post_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def list_post_ids_by_user(self, user_id: UUID) -> List[UUID]:
        """Get the IDs of every post a user has liked"""
        stmt = select(PostLike.post_id).where(PostLike.user_id == user_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every like made by a user"""
        stmt = delete(PostLike).where(PostLike.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_posts(self, post_ids: List[UUID]) -> int:
        """Delete every like on the given posts"""
        if not post_ids:
            return 0
        stmt = delete(PostLike).where(PostLike.post_id.in_(post_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
