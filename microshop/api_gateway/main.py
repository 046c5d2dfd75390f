"""
API Gateway - Main Application
Routes client requests to the users and products services
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import structlog

from microshop.shared.utils.errors import register_exception_handlers
from microshop.shared.utils.logger import setup_logging
from microshop.api_gateway.config import settings
from microshop.api_gateway.routes import health, proxy
from microshop.api_gateway.utils.service_client import service_clients


setup_logging(
    settings.service_name,
    log_level=settings.log_level,
    log_format=settings.log_format,
    config_path=settings.log_config
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    logger.info(
        "Starting API Gateway",
        users_service=settings.users_service_url,
        products_service=settings.products_service_url
    )
    settings.log_config_summary()

    for client in service_clients.values():
        await client.start()

    yield

    for client in service_clients.values():
        await client.stop()

    logger.info("API Gateway shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Microshop - API Gateway",
    description="Single entry point proxying to the users and products services",
    version=settings.service_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    started = time.perf_counter()
    response = await call_next(request)

    logger.info(
        "Request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2)
    )

    return response


register_exception_handlers(app)

# Register routes
app.include_router(health.router, tags=["Health"])
app.include_router(proxy.router, tags=["Proxy"])


def run():
    """Start the gateway with uvicorn"""
    import uvicorn
    uvicorn.run(
        "microshop.api_gateway.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
