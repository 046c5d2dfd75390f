"""
Utility modules shared by the gateway and the resource services
"""

from .config import ServiceSettings
from .errors import (
    ServiceError,
    ValidationError,
    ConflictError,
    NotFoundError,
    UpstreamError,
    register_exception_handlers,
)
from .logger import setup_logging
from .store import EntityStore, utc_timestamp

__all__ = [
    "ServiceSettings",
    "ServiceError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "UpstreamError",
    "register_exception_handlers",
    "setup_logging",
    "EntityStore",
    "utc_timestamp",
]
