"""
User Entity

Represents a registered board member.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - a person who can post, like and chat.

    Business Rules:
    - Username must be unique across all users and never changes
    - Password stored as bcrypt hash
    - Deleting a user removes their posts, likes and chat messages
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=50)
    password_hash: str = Field(max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
