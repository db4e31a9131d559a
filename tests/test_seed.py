from __future__ import annotations

import asyncio

import pytest
from httpx import AsyncClient
from mongomock_motor import AsyncMongoMockClient
from typer.testing import CliRunner

from task_api.core.config import Settings
from task_api.db import seed
from task_api.db.seed import create_admin
from task_api.models import User, UserRole
from task_api.runtime import AppContext

from .conftest import basic_auth


async def test_create_admin_grants_admin_role(context: AppContext, client: AsyncClient) -> None:
    user = await create_admin(context, username="  root  ", password="rootpass")

    assert user is not None
    assert user.username == "root"
    assert user.role is UserRole.ADMIN

    response = await client.get("/users", headers=basic_auth("root", "rootpass"))
    assert response.status_code == 200
    assert [entry["role"] for entry in response.json()] == ["admin"]


async def test_create_admin_skips_existing_username(context: AppContext) -> None:
    assert await create_admin(context, username="root", password="rootpass") is not None
    assert await create_admin(context, username="root", password="other") is None


async def test_create_admin_requires_credentials(context: AppContext) -> None:
    with pytest.raises(ValueError):
        await create_admin(context, username=" ", password="rootpass")


@pytest.fixture
def cli_client(monkeypatch: pytest.MonkeyPatch, settings: Settings) -> AsyncMongoMockClient:
    mongo = AsyncMongoMockClient()
    monkeypatch.setattr(seed, "get_settings", lambda: settings)
    monkeypatch.setattr(seed, "configure_logging", lambda _settings: None)
    monkeypatch.setattr(seed, "build_context", lambda s: AppContext.build(s, client=mongo))
    return mongo


def test_cli_creates_admin_then_refuses_duplicate(cli_client: AsyncMongoMockClient) -> None:
    runner = CliRunner()

    created = runner.invoke(seed.app, ["--username", "root", "--password", "rootpass"])
    duplicate = runner.invoke(seed.app, ["--username", "root", "--password", "other"])

    assert created.exit_code == 0, created.output
    assert "Created admin 'root'" in created.output
    assert duplicate.exit_code == 1
    assert "already exists" in duplicate.output

    stored = asyncio.run(User.find_one(User.username == "root"))
    assert stored is not None
    assert stored.role is UserRole.ADMIN


def test_cli_requires_username(cli_client: AsyncMongoMockClient) -> None:
    result = CliRunner().invoke(seed.app, ["--password", "rootpass"])

    assert result.exit_code == 2


def test_cli_rejects_blank_username(cli_client: AsyncMongoMockClient) -> None:
    result = CliRunner().invoke(seed.app, ["--username", "  ", "--password", "rootpass"])

    assert result.exit_code == 2
