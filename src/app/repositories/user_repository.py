from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from src.domain.entities import User


class DuplicateEmailError(Exception):
    """Raised when a user with the same email already exists"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """Get all users in registration order"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user. Raises DuplicateEmailError if the email is taken."""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def set_blocked(self, user_ids: Iterable[UUID], blocked: bool) -> int:
        """Set the blocked flag for every existing id. Returns count of updated users."""
        pass

    @abstractmethod
    async def delete_by_ids(self, user_ids: Iterable[UUID]) -> int:
        """Delete every existing id. Returns count of deleted users."""
        pass
