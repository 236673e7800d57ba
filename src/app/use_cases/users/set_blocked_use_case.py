"""
Set Blocked Use Case

Blocks or unblocks a set of users in one statement.
"""

import logging
from typing import List, Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import BulkUpdateResponse
from .user_ids import NO_USERS_SELECTED, parse_user_ids

logger = logging.getLogger(__name__)


class SetBlockedUseCase:
    """
    Use case for the block and unblock endpoints.

    Business Rules:
    - An empty id list is rejected (NO_USERS_SELECTED)
    - Ids that do not exist are skipped without error
    - Blocking does not end existing sessions; it only prevents new logins
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_ids: List[str], blocked: bool, requested_by: Optional[str] = None
    ) -> Result[BulkUpdateResponse]:
        """
        Args:
            user_ids: Raw ids from the request body
            blocked: New value of the blocked flag
            requested_by: User id of the caller, for the log line

        Returns:
            Result with requested/affected counts, or Error(NO_USERS_SELECTED)
        """
        if not user_ids:
            return Return.err(NO_USERS_SELECTED)

        ids = parse_user_ids(user_ids)

        async with self.uow:
            affected = await self.uow.users.set_blocked(ids, blocked) if ids else 0
            await self.uow.commit()

        logger.info(
            f"{'Blocked' if blocked else 'Unblocked'} {affected} of "
            f"{len(user_ids)} user(s), requested by {requested_by}"
        )
        return Return.ok(BulkUpdateResponse(requested=len(user_ids), affected=affected))
