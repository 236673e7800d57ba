from typing import Iterable, List, Optional
from uuid import UUID

from libs.result import Error


def parse_user_ids(raw_ids: Optional[Iterable[str]]) -> List[UUID]:
    """
    Parse caller supplied ids, dropping duplicates.

    Ids that are not valid UUIDs cannot match any user and are skipped,
    the same as ids that do not exist.
    """
    parsed = []
    for raw in raw_ids or []:
        try:
            parsed.append(UUID(str(raw)))
        except ValueError:
            continue
    return list(dict.fromkeys(parsed))


NO_USERS_SELECTED = Error("NO_USERS_SELECTED", "No users selected")
