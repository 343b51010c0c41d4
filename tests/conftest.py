"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator
from uuid import UUID

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tenantgate.config import Settings
from tenantgate.core.auth import create_session_token
from tenantgate.core.auth.service import ensure_admin_user
from tenantgate.core.database import get_db
from tenantgate.main import create_app
from tenantgate.modules.tenants.models import Tenant
from tenantgate.modules.users.models import User
from tests.factories import AdminSeedFactory, TenantFactory


TEST_SECRET_KEY = "test-secret-key-with-at-least-32-characters"


@pytest.fixture
def settings() -> Settings:
    """Settings for an isolated in-memory application."""
    return Settings(
        _env_file=None,
        environment="testing",
        secret_key=TEST_SECRET_KEY,
        database_url="sqlite+aiosqlite:///:memory:",
        root_domain="example.com",
        preview_domain_suffix="vercel.app",
        dev_port=3001,
        admin_email=None,
        admin_password=None,
        log_level="WARNING",
    )


@pytest.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """Create test application instance with a fresh schema."""
    application = create_app(settings)
    await application.state.database.create_all()

    yield application

    application.dependency_overrides.clear()
    await application.state.database.dispose()


@pytest.fixture
async def db(app: FastAPI) -> AsyncGenerator[AsyncSession, None]:
    """Provide the database session shared by the test and the app.

    Fixtures only flush; the session is never committed.
    """
    async with app.state.database.session_factory() as session:
        yield session


@pytest.fixture
async def client(app: FastAPI, db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API testing."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


# ============================================================
# Tenant and User Fixtures
# ============================================================


@pytest.fixture
async def tenant(db: AsyncSession) -> Tenant:
    """Create a test tenant.

    Returns:
        A persisted Tenant instance
    """
    tenant = Tenant(**TenantFactory.build().model_dump())
    db.add(tenant)
    await db.flush()
    await db.refresh(tenant)
    return tenant


@pytest.fixture
async def admin_user(db: AsyncSession) -> User:
    """Create an admin user; its password is ``AdminPass123!``."""
    seed = AdminSeedFactory.build()
    user, _ = await ensure_admin_user(db, seed.email, seed.password, seed.role)
    return user


def session_cookie(
    settings: Settings, user_id: UUID, email: str, role: str
) -> dict[str, str]:
    """Build a Cookie header carrying a session for the given identity."""
    token = create_session_token(
        user_id=user_id,
        email=email,
        role=role,
        secret_key=settings.secret_key,
        algorithm=settings.jwt_algorithm,
        max_age=settings.session_max_age,
    )
    return {"Cookie": f"{settings.session_cookie_name}={token}"}


@pytest.fixture
async def admin_client(
    app: FastAPI,
    client: AsyncClient,
    settings: Settings,
    admin_user: User,
) -> AsyncGenerator[AsyncClient, None]:
    """Provide an HTTP client carrying a valid admin session cookie.

    Depends on ``client`` so the database override is installed.
    """
    headers = session_cookie(settings, admin_user.id, admin_user.email, admin_user.role)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=headers,
    ) as authed:
        yield authed
