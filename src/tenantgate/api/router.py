"""Root API router with the health endpoint and module mounting."""

from datetime import UTC, datetime

import structlog
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from tenantgate.api.dependencies import AppSettings, DBSession
from tenantgate.core.auth.routes import router as auth_router
from tenantgate.modules import discover_modules


logger = structlog.get_logger()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    timestamp: datetime
    environment: str


health_router = APIRouter(tags=["health"])


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns 200 when the database answers, 500 otherwise.",
)
async def health(db: DBSession, settings: AppSettings) -> JSONResponse | HealthResponse:
    """Health check endpoint."""
    now = datetime.now(UTC)
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error("health_check_failed", error=str(e))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "message": "Database connection failed",
                "timestamp": now.isoformat(),
            },
        )

    return HealthResponse(
        status="ok",
        timestamp=now,
        environment=settings.environment,
    )


# Everything JSON lives under /api
api_router = APIRouter(prefix="/api")

api_router.include_router(health_router)
api_router.include_router(auth_router)

# Mount discovered module routers
for module_router in discover_modules():
    api_router.include_router(module_router)
