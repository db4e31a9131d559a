"""Operator command for bootstrapping administrator accounts.

Public registration always creates regular users; this command is the only way
to create an ``admin``::

    task-api-create-admin --username root --password 's3cret'
"""

from __future__ import annotations

import asyncio
import logging

import typer

from ..core.config import Settings, get_settings
from ..core.logging import configure_logging
from ..models import User, UserRole
from ..runtime import AppContext
from ..services import UserService

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="task-api-create-admin",
    help="Create an administrator account in the configured document store.",
    add_completion=False,
)


async def create_admin(context: AppContext, *, username: str, password: str) -> User | None:
    """Create an admin account, returning ``None`` if the username is taken."""

    username = username.strip()
    if not username or not password:
        raise ValueError("username and password are required")
    service = UserService(context)
    if await service.get_user_by_username(username) is not None:
        logger.warning("Username already exists", extra={"username": username})
        return None
    return await service.create_user(username=username, password=password, role=UserRole.ADMIN)


def build_context(settings: Settings) -> AppContext:
    return AppContext.build(settings)


async def _create_with_context(settings: Settings, username: str, password: str) -> User | None:
    context = build_context(settings)
    await context.startup()
    try:
        return await create_admin(context, username=username, password=password)
    finally:
        await context.shutdown()


@app.command()
def main(
    username: str = typer.Option(..., "--username", "-u", help="Login name of the new admin"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        help="Password for the new admin",
        prompt=True,
        hide_input=True,
    ),
) -> None:
    """Create an admin account; exits with status 1 if the username is taken."""
    settings = get_settings()
    configure_logging(settings)
    try:
        user = asyncio.run(_create_with_context(settings, username, password))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if user is None:
        typer.echo(f"Username {username.strip()!r} already exists.", err=True)
        raise typer.Exit(1)
    logger.info("Admin account created", extra={"user_id": str(user.id), "username": user.username})
    typer.echo(f"Created admin {user.username!r} ({user.id}).")


if __name__ == "__main__":  # pragma: no cover - manual execution entry-point
    app()
