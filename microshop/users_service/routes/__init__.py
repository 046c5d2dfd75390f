"""
API routes for users service
"""

from . import health, users

__all__ = ["health", "users"]
