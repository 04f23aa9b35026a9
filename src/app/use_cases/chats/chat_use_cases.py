"""
Chat Use Cases

The shared chat room is append-only: messages can be posted and read,
never edited or deleted individually.
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ChatMessage
from src.domain.result import Error, Result, Return
from src.domain.validators import validate_chat_message
from .dtos import ChatCommand, ChatInfo, ChatListResponse, ChatResponse

CHATS_PAGE_SIZE = 100


def _to_info(chat: ChatMessage, username: str) -> ChatInfo:
    return ChatInfo(
        id=str(chat.id),
        user_id=str(chat.user_id),
        username=username,
        message=chat.message,
        created_at=chat.created_at,
    )


class CreateChatUseCase:
    """
    Use case for posting a chat message.

    Business Rules:
    - Message must contain something other than whitespace
    - Message is at most 500 characters
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: ChatCommand) -> Result[ChatResponse]:
        error = validate_chat_message(command.message)
        if error:
            return Return.err(error)

        async with self.uow:
            author = await self.uow.users.get_by_id(user_id)
            if author is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            chat = await self.uow.chats.create(
                ChatMessage(user_id=user_id, message=command.message)
            )
            await self.uow.commit()

            return Return.ok(ChatResponse(chat=_to_info(chat, author.username)))


class ListChatsUseCase:
    """Latest messages, returned oldest first so clients can append in order"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, limit: int = CHATS_PAGE_SIZE) -> Result[ChatListResponse]:
        async with self.uow:
            rows = await self.uow.chats.list_latest(limit)
            chats = [_to_info(chat, username) for chat, username in reversed(rows)]
            return Return.ok(ChatListResponse(chats=chats))
