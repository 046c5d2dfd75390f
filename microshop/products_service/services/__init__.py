"""
Business logic services for products service
"""

from .product_service import ProductService, create_product_store

__all__ = ["ProductService", "create_product_store"]
