"""Entry point for the task API application."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from motor.motor_asyncio import AsyncIOMotorClient

from .api.routers import api_router, health_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.middleware import AccessLogMiddleware, CorrelationIdMiddleware
from .errors import register_exception_handlers
from .runtime import AppContext


def create_app(
    settings: Settings | None = None,
    *,
    client: AsyncIOMotorClient | None = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    ``client`` replaces the MongoDB client built from ``settings.mongo_url``;
    tests pass an in-memory client here.
    """

    settings = settings or get_settings()
    configure_logging(settings)

    router_prefix = settings.router_prefix
    openapi_url = "/openapi.json" if not router_prefix else f"{router_prefix}/openapi.json"

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="Multi-tenant task tracking API with HTTP Basic authentication.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=openapi_url,
    )

    context = AppContext.build(settings, client=client)
    application.state.settings = settings
    application.state.context = context

    # Outermost last: the correlation id is bound before the access log runs.
    application.add_middleware(AccessLogMiddleware)
    application.add_middleware(CorrelationIdMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    if router_prefix:
        application.include_router(api_router, prefix=router_prefix)
    else:
        application.include_router(api_router)

    application.include_router(health_router)

    register_exception_handlers(application)

    @application.on_event("startup")
    async def _connect_document_store() -> None:
        await context.startup()

    @application.on_event("shutdown")
    async def _close_document_store() -> None:
        await context.shutdown()

    return application


def run() -> None:
    """Convenience entry point for the ``task-api`` script."""

    settings: Settings = get_settings()
    uvicorn.run(
        "task_api.main:create_app",
        factory=True,
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )


__all__ = ["create_app", "run"]
