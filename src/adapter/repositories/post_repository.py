from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.post_repository import IPostRepository
from src.domain.entities import Post, User


class PostRepository(IPostRepository):
    """Post repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, post_id: UUID) -> Optional[Post]:
        """Get post by ID"""
        stmt = (
            select(Post)
            .where(Post.id == post_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_with_author(self, post_id: UUID) -> Optional[Tuple[Post, str]]:
        """Get post by ID together with the author's username"""
        stmt = (
            select(Post, User.username)
            .join(User, Post.user_id == User.id)
            .where(Post.id == post_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        row = result.one_or_none()
        return tuple(row) if row is not None else None

    async def list_latest(self, limit: int) -> List[Tuple[Post, str]]:
        """Get the newest posts with author usernames, newest first"""
        stmt = (
            select(Post, User.username)
            .join(User, Post.user_id == User.id)
            .order_by(Post.created_at.desc())
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return [tuple(row) for row in result.all()]

    async def create(self, post: Post) -> Post:
        """Create a new post"""
        self.session.add(post)
        await self.session.flush()
        await self.session.refresh(post)
        return post

    async def update(self, post: Post) -> Post:
        """Update existing post"""
        self.session.add(post)
        await self.session.flush()
        await self.session.refresh(post)
        return post

    async def delete(self, post: Post) -> None:
        """Delete a post row"""
        await self.session.delete(post)
        await self.session.flush()

    async def adjust_likes(self, post_id: UUID, delta: int) -> int:
        """
        Add delta to the like counter of a post.

        The counter is changed with a single UPDATE so concurrent toggles on
        the same post never overwrite each other's increments.
        """
        stmt = update(Post).where(Post.id == post_id)
        if delta < 0:
            stmt = stmt.where(Post.likes >= -delta)
        stmt = stmt.values(likes=Post.likes + delta)
        await self.session.execute(stmt)
        await self.session.flush()

        result = await self.session.exec(select(Post.likes).where(Post.id == post_id))
        return result.one()

    async def decrement_likes(self, post_ids: List[UUID]) -> int:
        """Decrement the like counter of each post by one"""
        if not post_ids:
            return 0
        stmt = (
            update(Post)
            .where(Post.id.in_(post_ids), Post.likes > 0)
            .values(likes=Post.likes - 1)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def list_ids_by_user(self, user_id: UUID) -> List[UUID]:
        """Get the IDs of every post owned by a user"""
        result = await self.session.exec(select(Post.id).where(Post.user_id == user_id))
        return list(result.all())

    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every post owned by a user"""
        stmt = delete(Post).where(Post.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
