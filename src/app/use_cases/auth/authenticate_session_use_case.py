"""
Authenticate Session Use Case

Resolves a cookie token to the session it was issued for.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.session_tokens import hash_session_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import CurrentSession


class AuthenticateSessionUseCase:
    """
    Use case backing the session check on protected routes.

    Business Rules:
    - Missing or unknown token: SESSION_NOT_FOUND
    - Expired session: SESSION_EXPIRED, and the session is deleted
    - Only presence is checked; the user record is not re-read
    """

    def __init__(self, uow: UnitOfWork, session_secret: str):
        self.uow = uow
        self.session_secret = session_secret

    async def execute(self, session_token: Optional[str]) -> Result[CurrentSession]:
        if not session_token:
            return Return.err(Error("SESSION_NOT_FOUND", "You must be logged in"))

        token_hash = hash_session_token(session_token, self.session_secret)

        async with self.uow:
            session = await self.uow.sessions.get_by_token_hash(token_hash)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "You must be logged in"))

            if session.is_expired(utcnow()):
                await self.uow.sessions.delete_by_token_hash(token_hash)
                await self.uow.commit()
                return Return.err(Error("SESSION_EXPIRED", "Your session has expired"))

            return Return.ok(CurrentSession(user_id=str(session.user_id)))
