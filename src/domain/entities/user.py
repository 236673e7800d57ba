"""
User Entity

Represents an account that can log in and be managed by other users.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - a registered account.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash, never plaintext
    - Blocked users keep their record but cannot log in
    - Deletion is physical (no soft delete)
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    blocked: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_blocked", "blocked"),)
