"""
Error taxonomy and FastAPI exception handlers
"""

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

logger = structlog.get_logger(__name__)


class ServiceError(Exception):
    """Base class for errors that map onto an HTTP status"""

    status_code = 500

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON error body"""
        return {"error": self.message, **self.context}


class ValidationError(ServiceError):
    """Malformed or missing input"""
    status_code = 400


class ConflictError(ServiceError):
    """Uniqueness violation"""
    status_code = 409


class NotFoundError(ServiceError):
    """Unknown record or route"""
    status_code = 404


class UpstreamError(ServiceError):
    """Gateway to backend failure"""
    status_code = 500

    def __init__(self, message: str, upstream_status: Optional[int] = None, **context: Any):
        super().__init__(message, **context)
        self.upstream_status = upstream_status


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into JSON-safe field/message pairs"""
    formatted = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        formatted.append({
            "field": ".".join(location),
            "message": str(error.get("msg", "Invalid value"))
        })
    return formatted


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers shared by every service"""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Render HTTP exceptions as JSON error bodies"""
        if isinstance(exc.detail, dict):
            return JSONResponse(status_code=exc.status_code, content=exc.detail)

        # Unrouted paths and methods share the not-found body
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content={"error": "Not found", "path": request.url.path}
            )

        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed requests are client errors"""
        logger.warning(
            "Request validation failed",
            method=request.method,
            path=request.url.path,
            errors=len(exc.errors())
        )
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid request",
                "details": format_validation_errors(exc.errors())
            }
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(
            "Unhandled exception",
            error=str(exc),
            method=request.method,
            url=str(request.url),
            exc_info=True
        )

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred"
            }
        )
