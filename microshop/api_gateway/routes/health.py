"""
Health check routes for the API gateway
"""

import time

from fastapi import APIRouter

from microshop.shared.utils.store import utc_timestamp
from microshop.api_gateway.config import settings
from microshop.api_gateway.utils.service_client import service_clients

router = APIRouter()

STARTED_AT = time.monotonic()


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "timestamp": utc_timestamp(),
        "uptime": round(time.monotonic() - STARTED_AT, 3),
        "backends": {name: client.base_url for name, client in service_clients.items()}
    }


@router.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "API Gateway - Microservices Architecture",
        "service": settings.service_name,
        "version": settings.service_version,
        "endpoints": {
            "health": "/health",
            "users": "/api/users",
            "products": "/api/products"
        }
    }
