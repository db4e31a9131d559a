"""Base repository implementation over beanie documents."""

from __future__ import annotations

from typing import Generic, TypeVar

from beanie import Document, PydanticObjectId

DocumentType = TypeVar("DocumentType", bound=Document)


class BaseRepository(Generic[DocumentType]):
    """Provide shared persistence helpers for repositories."""

    def __init__(self, document_type: type[DocumentType]) -> None:
        self._document_type = document_type

    async def get(self, entity_id: PydanticObjectId) -> DocumentType | None:
        """Retrieve a document by its identifier."""
        return await self._document_type.get(entity_id)

    async def add(self, instance: DocumentType) -> DocumentType:
        """Insert a new document."""
        await instance.insert()
        return instance

    async def delete(self, instance: DocumentType) -> None:
        """Remove a document."""
        await instance.delete()

    async def count(self) -> int:
        """Return the number of stored documents."""
        return await self._document_type.find_all().count()
