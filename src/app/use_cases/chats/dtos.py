"""
Chat Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class ChatCommand(BaseModel):
    message: Optional[str] = None


class ChatInfo(BaseModel):
    """Chat message as returned to clients"""

    id: str
    user_id: str
    username: str
    message: str
    created_at: datetime


class ChatResponse(BaseModel):
    success: bool = True
    chat: ChatInfo


class ChatListResponse(BaseModel):
    success: bool = True
    chats: List[ChatInfo]
