"""FastAPI application factory.

Run with ``uvicorn tenantgate.main:create_app --factory`` or ``tenantgate serve``.
"""

import re
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tenantgate import __version__
from tenantgate.api.pages import router as pages_router
from tenantgate.api.router import api_router
from tenantgate.config import Settings, get_settings
from tenantgate.core.audit.models import AuditLog  # noqa: F401 - register model
from tenantgate.core.auth import CookieSessionAuthenticator
from tenantgate.core.auth.service import ensure_admin_user
from tenantgate.core.constants import REQUEST_ID_HEADER, TENANT_SLUG_HEADER
from tenantgate.core.database import Database
from tenantgate.core.errors import register_exception_handlers
from tenantgate.core.logging import (
    RequestIdMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)
from tenantgate.core.tenancy import HostnamePolicy, TenantRoutingMiddleware
from tenantgate.modules.tenants.models import Tenant  # noqa: F401 - register model
from tenantgate.modules.users.models import User  # noqa: F401 - register model


logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Ensures the bootstrap admin on startup and closes the pool on shutdown.
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database

    logger.info(
        "application_startup",
        app_name=settings.app_name,
        environment=settings.environment,
    )

    if settings.admin_email and settings.admin_password:
        async with database.session_factory() as session:
            user, created = await ensure_admin_user(
                session,
                email=settings.admin_email,
                password=settings.admin_password,
                role=settings.admin_role,
            )
            await session.commit()
        logger.info("admin_user_ensured", email=user.email, created=created)

    yield

    logger.info("application_shutdown")
    await database.dispose()
    logger.info("database_disposed")


def _dev_origin_regex(settings: Settings) -> str:
    """Origins for the root domain, its subdomains and *.localhost in development."""
    root = re.escape(settings.root_domain)
    return (
        rf"^https?://(([a-z0-9-]+\.)*{root}"
        rf"|([a-z0-9-]+\.)?localhost(:{settings.dev_port})?)$"
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Explicit settings (tests); defaults to the cached environment settings

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant SaaS backend with subdomain routing",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        # Disable docs in production
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
    )

    app.state.settings = settings
    app.state.database = Database(settings)
    app.state.authenticator = CookieSessionAuthenticator.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=_dev_origin_regex(settings) if settings.is_development else None,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER, TENANT_SLUG_HEADER],
    )

    # Middleware added last runs first: request ID, then logging, then routing
    app.add_middleware(
        TenantRoutingMiddleware,
        policy=HostnamePolicy.from_settings(settings),
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIdMiddleware)

    # Register exception handlers for RFC 7807 error responses
    register_exception_handlers(app)

    app.include_router(api_router)
    app.include_router(pages_router)

    return app
