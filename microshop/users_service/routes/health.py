"""
Health check routes for users service
"""

import time

from fastapi import APIRouter, Request

from microshop.shared.utils.store import utc_timestamp
from microshop.users_service.config import settings

router = APIRouter()

STARTED_AT = time.monotonic()


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "timestamp": utc_timestamp(),
        "uptime": round(time.monotonic() - STARTED_AT, 3),
        "totalUsers": len(request.app.state.user_service.store)
    }


@router.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Users Service - User Management Microservice",
        "service": settings.service_name,
        "version": settings.service_version,
        "endpoints": {
            "health": "/health",
            "users": "/users",
            "userById": "/users/:id",
            "stats": "/stats/users"
        }
    }
