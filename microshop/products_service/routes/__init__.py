"""
API routes for products service
"""

from . import health, products

__all__ = ["health", "products"]
