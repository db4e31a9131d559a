"""Helpers shared by the service layer."""

from __future__ import annotations

from beanie import PydanticObjectId
from bson import ObjectId
from bson.errors import InvalidId

from ..errors import INVALID_IDENTIFIER_MESSAGE, BadRequestError


def parse_object_id(value: object) -> PydanticObjectId:
    """Convert ``value`` into a document identifier.

    Malformed identifiers are reported as ``BadRequestError`` on every code path.
    """

    if isinstance(value, ObjectId):
        return PydanticObjectId(value)
    if not isinstance(value, str):
        raise BadRequestError(INVALID_IDENTIFIER_MESSAGE)
    try:
        return PydanticObjectId(value.strip())
    except (InvalidId, TypeError) as exc:
        raise BadRequestError(INVALID_IDENTIFIER_MESSAGE) from exc


__all__ = ["parse_object_id"]
