from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import DuplicateEmailError, IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[User]:
        """Get all users in registration order"""
        stmt = select(User).order_by(User.created_at, User.id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, user: User) -> User:
        """Create a new user; the unique index on email is the final arbiter"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicateEmailError(user.email) from exc
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """Update existing user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def set_blocked(self, user_ids: Iterable[UUID], blocked: bool) -> int:
        """Set the blocked flag for every existing id"""
        ids = _require_ids(user_ids)
        stmt = update(User).where(User.id.in_(ids)).values(blocked=blocked)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_ids(self, user_ids: Iterable[UUID]) -> int:
        """Delete every existing id"""
        ids = _require_ids(user_ids)
        stmt = delete(User).where(User.id.in_(ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount


def _require_ids(user_ids: Iterable[UUID]) -> List[UUID]:
    ids = list(dict.fromkeys(user_ids))
    if not ids:
        raise ValueError("user_ids must not be empty")
    return ids
