"""Tenants module: registration, lookup and admin management."""

from fastapi import APIRouter

from tenantgate.modules.tenants.routes import admin_router, public_router


router = APIRouter()
router.include_router(public_router)
router.include_router(admin_router)

__all__ = ["router"]
