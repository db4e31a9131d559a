from __future__ import annotations

import base64
from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass
from itertools import count

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from task_api.core.config import Settings
from task_api.main import create_app
from task_api.models import User, UserRole
from task_api.runtime import AppContext
from task_api.services import UserService


def basic_auth(username: str, password: str) -> dict[str, str]:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


@dataclass(slots=True)
class Account:
    user: User
    username: str
    password: str

    @property
    def id(self) -> str:
        if self.user.id is None:  # pragma: no cover - defensive guard
            raise RuntimeError("Persisted user is missing an id.")
        return str(self.user.id)

    @property
    def headers(self) -> dict[str, str]:
        return basic_auth(self.username, self.password)


AccountFactory = Callable[..., Awaitable[Account]]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        mongo_database="task_api_test",
        password_hash_rounds=4,
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    application = create_app(settings, client=AsyncMongoMockClient())
    context: AppContext = application.state.context
    await context.startup()
    try:
        yield application
    finally:
        await context.shutdown()


@pytest_asyncio.fixture
async def context(app: FastAPI) -> AppContext:
    return app.state.context


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as http_client:
        yield http_client


@pytest_asyncio.fixture
async def account_factory(context: AppContext) -> AccountFactory:
    service = UserService(context)
    counter = count()

    async def _factory(
        *,
        username: str | None = None,
        password: str = "StrongPass123!",
        role: UserRole = UserRole.USER,
    ) -> Account:
        actual_username = username or f"user-{next(counter)}"
        user = await service.create_user(username=actual_username, password=password, role=role)
        return Account(user=user, username=actual_username, password=password)

    return _factory


@pytest_asyncio.fixture
async def admin(account_factory: AccountFactory) -> Account:
    return await account_factory(username="admin", password="adminpass", role=UserRole.ADMIN)


@pytest_asyncio.fixture
async def alice(account_factory: AccountFactory) -> Account:
    return await account_factory(username="alice", password="secret")


@pytest_asyncio.fixture
async def bob(account_factory: AccountFactory) -> Account:
    return await account_factory(username="bob", password="123456")
