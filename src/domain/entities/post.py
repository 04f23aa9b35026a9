"""
Post Entity

A board article owned by the user who wrote it.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Post(SQLModel, table=True):
    """
    Post entity - an article on the board.

    Business Rules:
    - Only the owner may update or delete a post
    - likes always equals the number of PostLike rows for the post
    """

    __tablename__ = "posts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)

    title: str = Field(max_length=255)
    content: str
    likes: int = Field(default=0)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_post_created_at", "created_at"),)
