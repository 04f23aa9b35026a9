from typing import List, Tuple
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.chat_repository import IChatRepository
from src.domain.entities import ChatMessage, User


class ChatRepository(IChatRepository):
    """Chat message repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, chat: ChatMessage) -> ChatMessage:
        """Create a chat message"""
        self.session.add(chat)
        await self.session.flush()
        await self.session.refresh(chat)
        return chat

    async def list_latest(self, limit: int) -> List[Tuple[ChatMessage, str]]:
        """Get the newest messages with author usernames, newest first"""
        stmt = (
            select(ChatMessage, User.username)
            .join(User, ChatMessage.user_id == User.id)
            .order_by(ChatMessage.created_at.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return [tuple(row) for row in result.all()]

    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every message written by a user"""
        stmt = delete(ChatMessage).where(ChatMessage.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
