from abc import ABC, abstractmethod
from typing import List, Tuple
from uuid import UUID

from src.domain.entities import ChatMessage


class IChatRepository(ABC):
    """Chat message repository interface - application layer"""

    @abstractmethod
    async def create(self, chat: ChatMessage) -> ChatMessage:
        """Create a chat message"""
        pass

    @abstractmethod
    async def list_latest(self, limit: int) -> List[Tuple[ChatMessage, str]]:
        """Get the newest messages with author usernames, newest first"""
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UUID) -> int:
        """Delete every message written by a user. Returns count."""
        pass
