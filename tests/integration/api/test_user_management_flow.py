import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_register_login_block_unblock_flow(client: AsyncClient):
    """End to end: register, login, list, block self, login refused, unblock, login again"""
    alice = {"name": "A", "email": "a@x.com", "password": "pw1"}
    credentials = {"email": alice["email"], "password": alice["password"]}

    assert (await client.post("/api/register", json=alice)).status_code == 201

    login = await client.post("/api/login", json=credentials)
    assert login.status_code == 200
    alice_id = login.json()["userId"]
    assert "sid" in client.cookies

    rows = (await client.get("/api/users")).json()
    assert [(row["id"], row["blocked"]) for row in rows] == [(alice_id, False)]

    assert (await client.post("/api/block", json={"userIds": [alice_id]})).status_code == 200

    # Blocking does not end the current session
    rows = (await client.get("/api/users")).json()
    assert rows[0]["blocked"] is True

    refused = await client.post("/api/login", json=credentials)
    assert refused.status_code == 403
    assert refused.json()["error"]["code"] == "ACCOUNT_BLOCKED"

    assert (await client.post("/api/unblock", json={"userIds": [alice_id]})).status_code == 200

    again = await client.post("/api/login", json=credentials)
    assert again.status_code == 200
    assert again.json()["userId"] == alice_id

    assert (await client.post("/api/logout")).status_code == 200
    assert (await client.get("/api/users")).status_code == 403
