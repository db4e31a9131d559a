"""Security helpers for password hashing and HTTP Basic credential parsing."""

from __future__ import annotations

import binascii
from base64 import b64decode
from dataclasses import dataclass

from fastapi.security.utils import get_authorization_scheme_param
from passlib.context import CryptContext
from starlette.concurrency import run_in_threadpool

BASIC_SCHEME = "basic"


class MalformedCredentialsError(ValueError):
    """Raised when a Basic credential payload cannot be decoded or split."""


@dataclass(slots=True, frozen=True)
class BasicCredentials:
    """Username and password extracted from an ``Authorization`` header."""

    username: str
    password: str


def create_password_context(rounds: int = 10) -> CryptContext:
    """Return a bcrypt ``CryptContext`` using ``rounds`` as the work factor."""

    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


async def hash_password(password: str, context: CryptContext) -> str:
    """Return a salted bcrypt hash of ``password``.

    The hash embeds both salt and cost, so verification needs nothing else.
    Hashing is CPU bound and runs in the threadpool to keep the event loop free.
    """

    return await run_in_threadpool(context.hash, password)


async def verify_password(password: str, hashed_password: str, context: CryptContext) -> bool:
    """Check ``password`` against ``hashed_password``; never raises on mismatch."""

    try:
        return await run_in_threadpool(context.verify, password, hashed_password)
    except (ValueError, TypeError):
        return False


def build_challenge(realm: str) -> dict[str, str]:
    """Return the ``WWW-Authenticate`` header naming the Basic scheme and realm."""

    return {"WWW-Authenticate": f'Basic realm="{realm}"'}


def extract_basic_payload(authorization: str | None) -> str | None:
    """Return the encoded credential payload, or ``None`` if not a Basic header."""

    scheme, param = get_authorization_scheme_param(authorization)
    if scheme.lower() != BASIC_SCHEME or not param:
        return None
    return param


def decode_basic_credentials(payload: str) -> BasicCredentials:
    """Decode a base64 ``username:password`` payload.

    The split happens on the first colon so passwords may contain colons.
    Raises ``MalformedCredentialsError`` when either part is empty.
    """

    try:
        decoded = b64decode(payload, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        raise MalformedCredentialsError("Credential payload is not valid base64.") from exc
    username, _, password = decoded.partition(":")
    if not username or not password:
        raise MalformedCredentialsError("Username and password must both be provided.")
    return BasicCredentials(username=username, password=password)


__all__ = [
    "BasicCredentials",
    "MalformedCredentialsError",
    "build_challenge",
    "create_password_context",
    "decode_basic_credentials",
    "extract_basic_payload",
    "hash_password",
    "verify_password",
]
