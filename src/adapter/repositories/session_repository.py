from datetime import datetime
from typing import Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import Session


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def get_by_token_hash(self, token_hash: str) -> Optional[Session]:
        """Get session by token digest"""
        stmt = select(Session).where(Session.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def delete_by_token_hash(self, token_hash: str) -> bool:
        """Delete a session by token digest"""
        stmt = delete(Session).where(Session.token_hash == token_hash)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_expired(self, now: datetime) -> int:
        """Delete all sessions expired at `now`"""
        stmt = delete(Session).where(Session.expires_at <= now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
