"""
ChatMessage Entity

A message in the shared chat room. Append-only.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class ChatMessage(SQLModel, table=True):
    __tablename__ = "chats"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    message: str = Field(max_length=500)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_chat_created_at", "created_at"),)
