"""Explicitly constructed application context shared by request handlers."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from motor.motor_asyncio import AsyncIOMotorClient
from passlib.context import CryptContext

from .core.config import Settings
from .core.security import create_password_context
from .db.session import DocumentStore


@dataclass(slots=True)
class AppContext:
    """Process-wide resources created once at startup and reused by every request."""

    settings: Settings
    store: DocumentStore
    passwords: CryptContext
    started_at: float = field(default_factory=time.monotonic)

    @classmethod
    def build(cls, settings: Settings, *, client: AsyncIOMotorClient | None = None) -> "AppContext":
        return cls(
            settings=settings,
            store=DocumentStore(settings, client=client),
            passwords=create_password_context(settings.password_hash_rounds),
        )

    @property
    def uptime(self) -> float:
        return time.monotonic() - self.started_at

    async def startup(self) -> None:
        await self.store.connect()

    async def shutdown(self) -> None:
        await self.store.close()


__all__ = ["AppContext"]
