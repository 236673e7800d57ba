"""
User Management Use Case DTOs

Only the fields listed here ever leave the service; password_hash is not one of them.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import User


class UserView(BaseModel):
    """Public projection of a User"""

    id: str
    name: str
    email: str
    blocked: bool
    last_login_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            blocked=user.blocked,
            last_login_at=user.last_login_at,
            created_at=user.created_at,
        )


class BulkUpdateResponse(BaseModel):
    """Aggregate outcome of a bulk operation"""

    requested: int
    affected: int
