import pytest
from httpx import AsyncClient

from tests.utils.api_helpers import list_users_by_email, login, register, register_and_login


@pytest.mark.asyncio
async def test_block_then_unblock_restores_users(client: AsyncClient, test_data):
    """Block followed by unblock leaves every user unblocked"""
    bob = test_data.get_copy("user_bob")
    carol = test_data.get_copy("user_carol")
    await register(client, bob)
    await register(client, carol)
    await register_and_login(client, test_data.get_copy("user_alice"))

    users = await list_users_by_email(client)
    ids = [users[bob["email"]]["id"], users[carol["email"]]["id"]]

    blocked = await client.post("/api/block", json={"userIds": ids})
    assert blocked.status_code == 200
    assert blocked.json() == {"message": "Users blocked successfully", "count": 2}

    users = await list_users_by_email(client)
    assert users[bob["email"]]["blocked"] is True
    assert users[carol["email"]]["blocked"] is True
    assert users["alice@example.com"]["blocked"] is False

    unblocked = await client.post("/api/unblock", json={"userIds": ids})
    assert unblocked.status_code == 200
    assert unblocked.json() == {"message": "Users unblocked successfully", "count": 2}

    users = await list_users_by_email(client)
    assert all(row["blocked"] is False for row in users.values())


@pytest.mark.asyncio
async def test_blocked_user_cannot_login_until_unblocked(client: AsyncClient, test_data):
    bob = test_data.get_copy("user_bob")
    await register(client, bob)
    await register_and_login(client, test_data.get_copy("user_alice"))
    bob_id = (await list_users_by_email(client))[bob["email"]]["id"]

    await client.post("/api/block", json={"userIds": [bob_id]})
    rejected = await client.post(
        "/api/login", json={"email": bob["email"], "password": bob["password"]}
    )
    assert rejected.status_code == 403

    await client.post("/api/unblock", json={"userIds": [bob_id]})
    assert await login(client, bob) == bob_id


@pytest.mark.asyncio
async def test_block_skips_unknown_ids(client: AsyncClient, test_data):
    """Unknown and malformed ids cause no error"""
    alice_id = await register_and_login(client, test_data.get_copy("user_alice"))

    response = await client.post(
        "/api/block",
        json={"userIds": [alice_id, "00000000-0000-0000-0000-000000000000", "garbage"]},
    )

    assert response.status_code == 200
    assert response.json()["count"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/block", "/api/unblock"])
@pytest.mark.parametrize("payload", [{"userIds": []}, {}])
async def test_block_without_selection(client: AsyncClient, test_data, path, payload):
    await register_and_login(client, test_data.get_copy("user_alice"))

    response = await client.post(path, json=payload)

    assert response.status_code == 400
    data = response.json()
    assert data["error"]["code"] == "NO_USERS_SELECTED"
    assert data["message"] == "No users selected"


@pytest.mark.asyncio
async def test_block_malformed_body(client: AsyncClient, test_data):
    await register_and_login(client, test_data.get_copy("user_alice"))

    response = await client.post("/api/block", json={"userIds": "not-a-list"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
