from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[Session]:
        """Get session by the digest of its cookie token"""
        pass

    @abstractmethod
    async def delete_by_token_hash(self, token_hash: str) -> bool:
        """Delete a session. Returns True if it existed; missing sessions are not an error."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete every session expired at `now`. Returns count of deleted sessions."""
        pass
