"""
Session Entity

Server-side record behind the session cookie.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class Session(SQLModel, table=True):
    """
    Session entity - proves a successful login.

    Business Rules:
    - Only the HMAC-SHA256 digest of the cookie token is stored
    - A user may hold several sessions at once (one per login)
    - Expired sessions are rejected and purged
    - user_id is not a foreign key: deleting a user leaves its sessions
      to expire instead of failing the delete
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    token_hash: str = Field(unique=True, index=True, max_length=64)
    user_id: UUID = Field(nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now
