import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.list_all = AsyncMock()
    uow.users.create = AsyncMock()
    uow.users.update = AsyncMock()
    uow.users.set_blocked = AsyncMock()
    uow.users.delete_by_ids = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.get_by_token_hash = AsyncMock()
    uow.sessions.delete_by_token_hash = AsyncMock(return_value=True)
    uow.sessions.delete_expired = AsyncMock(return_value=0)
    return uow


@pytest.fixture
def hasher():
    from src.adapter.services.password_hasher import BcryptPasswordHasher

    # Minimum cost factor keeps the suite fast
    return BcryptPasswordHasher(rounds=4)
