"""
Users Service - Main Application
User directory with CRUD, filtering and statistics over an in-memory store
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import structlog

from microshop.shared.utils.errors import register_exception_handlers
from microshop.shared.utils.logger import setup_logging
from microshop.users_service.config import settings
from microshop.users_service.routes import health, users
from microshop.users_service.services.user_service import UserService, create_user_store


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
    logger.info("Starting Users Service")
    settings.log_config_summary()

    app.state.user_service = UserService(create_user_store())
    logger.info("User store loaded", total_users=len(app.state.user_service.store))

    yield

    logger.info("Users Service shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Microshop - Users Service",
    description="User directory microservice",
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
app.include_router(users.router, tags=["Users"])


def run():
    """Start the service with uvicorn"""
    import uvicorn
    uvicorn.run(
        "microshop.users_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
