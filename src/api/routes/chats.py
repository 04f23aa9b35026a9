from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.chats import (
    ChatCommand,
    ChatListResponse,
    ChatResponse,
    CreateChatUseCase,
    ListChatsUseCase,
)
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/chats", tags=["Chats"])


class ChatRequest(BaseModel):
    """Chat message HTTP request payload"""

    message: Optional[str] = None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ChatResponse)
async def post_chat(
    request: ChatRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Post Chat Message

    Raises:
        - 400 Bad Request: Empty message or longer than 500 chars
        - 401 / 403: Missing or invalid token
        - 404 Not Found: Token belongs to a deleted account
    """
    use_case = CreateChatUseCase(uow)
    result = await use_case.execute(user_id, ChatCommand(message=request.message))

    if result.is_err():
        error = result.error
        if error.code == "INVALID_INPUT":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=ChatListResponse)
async def list_chats(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Latest 100 messages, oldest first"""
    result = await ListChatsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value
