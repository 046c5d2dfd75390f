"""
Health check routes for products service
"""

import time

from fastapi import APIRouter, Request

from microshop.shared.utils.store import utc_timestamp
from microshop.products_service.config import settings

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
        "totalProducts": len(request.app.state.product_service.store)
    }


@router.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Products Service - Product Catalog Microservice",
        "service": settings.service_name,
        "version": settings.service_version,
        "endpoints": {
            "health": "/health",
            "products": "/products",
            "productById": "/products/:id",
            "categories": "/categories",
            "search": "/search",
            "stock": "/products/:id/stock",
            "stats": "/stats/products"
        }
    }
