from __future__ import annotations

from httpx import AsyncClient

from task_api.models import User, UserRole

from .conftest import Account, AccountFactory, basic_auth


async def test_register_creates_regular_user_without_hash(client: AsyncClient) -> None:
    response = await client.post(
        "/users",
        json={"username": "  charlie  ", "password": "p@ss", "role": "admin"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "charlie"
    assert body["role"] == UserRole.USER.value
    assert {"id", "createdAt", "updatedAt"} <= body.keys()
    assert "passwordHash" not in body
    assert "password_hash" not in body

    stored = await User.find_one(User.username == "charlie")
    assert stored is not None
    assert stored.role is UserRole.USER
    assert stored.password_hash != "p@ss"


async def test_register_rejects_duplicate_username(client: AsyncClient, alice: Account) -> None:
    response = await client.post("/users", json={"username": "alice", "password": "whatever"})

    assert response.status_code == 409
    assert response.json() == {"message": "Username already exists"}


async def test_username_uniqueness_is_case_sensitive(client: AsyncClient, alice: Account) -> None:
    response = await client.post("/users", json={"username": "Alice", "password": "whatever"})
    assert response.status_code == 201


async def test_register_requires_username_and_password(client: AsyncClient) -> None:
    for payload in ({"username": ""}, {"password": "x"}, {"username": "   ", "password": "x"}, {}):
        response = await client.post("/users", json=payload)
        assert response.status_code == 400, payload
        assert "message" in response.json()


async def test_registered_user_can_authenticate(client: AsyncClient) -> None:
    await client.post("/users", json={"username": "dana", "password": "pa:ss word"})

    response = await client.get("/tasks", headers=basic_auth("dana", "pa:ss word"))
    assert response.status_code == 200


async def test_admin_lists_users_newest_first(
    client: AsyncClient,
    admin: Account,
    account_factory: AccountFactory,
) -> None:
    first = await account_factory(username="first")
    second = await account_factory(username="second")

    response = await client.get("/users", headers=admin.headers)

    assert response.status_code == 200
    users = response.json()
    assert [user["username"] for user in users][:2] == ["second", "first"]
    assert set(users[0]) == {"id", "username", "role", "createdAt"}
    assert users[0]["id"] == second.id
    assert users[1]["id"] == first.id


async def test_non_admin_cannot_list_users(client: AsyncClient, alice: Account) -> None:
    response = await client.get("/users", headers=alice.headers)

    assert response.status_code == 403
    assert response.json() == {"message": "Admin only"}


async def test_listing_users_requires_authentication(client: AsyncClient) -> None:
    response = await client.get("/users")

    assert response.status_code == 401
    assert response.headers["www-authenticate"].startswith("Basic")
