"""
PostLike Entity

Records that a user liked a post.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel, UniqueConstraint

from src.domain.base import utcnow


class PostLike(SQLModel, table=True):
    """
    PostLike entity - source of truth for the liked state.

    Business Rules:
    - A user may like a given post at most once
    - Inserting or deleting a row changes Post.likes in the same transaction
    """

    __tablename__ = "post_likes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    post_id: UUID = Field(foreign_key="posts.id", ondelete="CASCADE", index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (UniqueConstraint("user_id", "post_id", name="uq_post_like"),)
