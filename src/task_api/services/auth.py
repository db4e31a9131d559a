"""Authentication gate resolving HTTP Basic credentials to a stored user."""

from __future__ import annotations

import logging

from ..core.security import (
    MalformedCredentialsError,
    build_challenge,
    decode_basic_credentials,
    extract_basic_payload,
    verify_password,
)
from ..errors import UnauthenticatedError
from ..models import User
from ..runtime import AppContext
from .users import UserService

logger = logging.getLogger(__name__)


class AuthService:
    """Authenticate requests carrying ``Authorization: Basic ...`` headers."""

    def __init__(self, context: AppContext) -> None:
        self._context = context
        self._user_service = UserService(context)

    def _unauthenticated(self, message: str) -> UnauthenticatedError:
        return UnauthenticatedError(message, headers=build_challenge(self._context.settings.auth_realm))

    async def authenticate(self, authorization: str | None) -> User:
        """Return the user identified by ``authorization`` or raise ``UnauthenticatedError``.

        Unknown usernames and wrong passwords share one message so callers cannot
        tell which part was wrong.
        """
        payload = extract_basic_payload(authorization)
        if payload is None:
            raise self._unauthenticated("Authentication required")

        try:
            credentials = decode_basic_credentials(payload)
        except MalformedCredentialsError as exc:
            raise self._unauthenticated("Invalid authorization header") from exc

        user = await self._user_service.get_user_by_username(credentials.username)
        if user is None:
            logger.info("Authentication failed", extra={"reason": "unknown_user"})
            raise self._unauthenticated("Invalid credentials")
        if not await verify_password(credentials.password, user.password_hash, self._context.passwords):
            logger.info("Authentication failed", extra={"reason": "bad_password"})
            raise self._unauthenticated("Invalid credentials")
        return user


__all__ = ["AuthService"]
