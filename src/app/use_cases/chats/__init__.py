"""
Chat Use Cases
"""

from .chat_use_cases import CreateChatUseCase, ListChatsUseCase
from .dtos import ChatCommand, ChatInfo, ChatListResponse, ChatResponse

__all__ = [
    "CreateChatUseCase",
    "ListChatsUseCase",
    "ChatCommand",
    "ChatInfo",
    "ChatListResponse",
    "ChatResponse",
]
