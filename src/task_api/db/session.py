"""Document store connection management."""

from __future__ import annotations

import asyncio
import logging

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from ..core.config import Settings
from ..models import DOCUMENT_MODELS

logger = logging.getLogger(__name__)


class DocumentStore:
    """Own the process-wide MongoDB client and bind the beanie documents to it."""

    def __init__(self, settings: Settings, *, client: AsyncIOMotorClient | None = None) -> None:
        self._settings = settings
        self._client = client
        self._initialized = False
        self._lock = asyncio.Lock()

    async def connect(self, *, force: bool = False) -> None:
        """Create the client if needed and initialise the beanie document models."""

        async with self._lock:
            if self._initialized and not force:
                return
            if self._client is None:
                self._client = AsyncIOMotorClient(
                    self._settings.mongo_url,
                    tz_aware=True,
                    uuidRepresentation="standard",
                )
            database = self._client[self._settings.database_name]
            await init_beanie(database=database, document_models=DOCUMENT_MODELS)
            self._initialized = True
            logger.info(
                "Document store initialised",
                extra={"database": self._settings.database_name},
            )

    async def close(self) -> None:
        """Dispose the MongoDB client."""

        async with self._lock:
            client = self._client
            if client is not None:
                client.close()
            self._client = None
            self._initialized = False


__all__ = ["DocumentStore"]
