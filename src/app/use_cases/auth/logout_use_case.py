"""
Logout Use Case

Destroys the session behind a cookie token. Idempotent.
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.session_tokens import hash_session_token
from src.app.services.unit_of_work import UnitOfWork
from .dtos import LogoutResponse


class LogoutUseCase:
    def __init__(self, uow: UnitOfWork, session_secret: str):
        self.uow = uow
        self.session_secret = session_secret

    async def execute(self, session_token: Optional[str]) -> Result[LogoutResponse]:
        if not session_token:
            return Return.ok(LogoutResponse(session_destroyed=False))

        async with self.uow:
            destroyed = await self.uow.sessions.delete_by_token_hash(
                hash_session_token(session_token, self.session_secret)
            )
            await self.uow.commit()

        return Return.ok(LogoutResponse(session_destroyed=destroyed))
