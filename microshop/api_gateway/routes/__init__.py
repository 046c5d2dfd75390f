"""
API routes for the API gateway
"""

from . import health, proxy

__all__ = ["health", "proxy"]
