"""Versioned API router — every module router is mounted under /api/v1."""

from fastapi import APIRouter

from fleetcare.modules.analytics.router import router as analytics_router
from fleetcare.modules.maintenance.router import router as maintenance_router

v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(maintenance_router)
v1_router.include_router(analytics_router)
