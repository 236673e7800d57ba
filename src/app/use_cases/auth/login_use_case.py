"""
Login Use Case

Handles user authentication and opens a server-side session.
"""

import logging
from datetime import timedelta
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.session_tokens import generate_session_token, hash_session_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Session
from .dtos import LoginResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and session creation.

    Business Rules:
    - Unknown email and wrong password give the same error
    - Constant-time password comparison; a dummy check runs when the user is missing
    - Blocked users are rejected before the password is checked
    - Updates user.last_login_at on every successful login
    - Each login opens an independent session; a session presented with the
      login request is destroyed first
    - Expired sessions are purged on login
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: IPasswordHasher,
        session_secret: str,
        session_ttl: timedelta,
    ):
        self.uow = uow
        self.hasher = hasher
        self.session_secret = session_secret
        self.session_ttl = session_ttl

    async def execute(
        self, email: str, password: str, previous_token: Optional[str] = None
    ) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password
            previous_token: Session token already held by the client, if any

        Returns:
            Result with LoginResponse containing the new session token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                self.hasher.dummy_verify()
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if user.blocked:
                logger.info(f"Login rejected for blocked user {user.id}")
                return Return.err(Error("ACCOUNT_BLOCKED", "Your account is blocked"))

            if not self.hasher.verify(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            now = utcnow()

            if previous_token:
                await self.uow.sessions.delete_by_token_hash(
                    hash_session_token(previous_token, self.session_secret)
                )
            purged = await self.uow.sessions.delete_expired(now)
            if purged:
                logger.debug(f"Purged {purged} expired session(s)")

            session_token = generate_session_token()
            session = Session(
                token_hash=hash_session_token(session_token, self.session_secret),
                user_id=user.id,
                created_at=now,
                expires_at=now + self.session_ttl,
            )
            session = await self.uow.sessions.create(session)

            user.last_login_at = now
            await self.uow.users.update(user)

            await self.uow.commit()

            logger.info(f"User logged in: {user.id}")

            return Return.ok(
                LoginResponse(
                    user_id=str(user.id),
                    session_token=session_token,
                    expires_at=session.expires_at,
                )
            )
