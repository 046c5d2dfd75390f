"""
Data models for products service
"""

from .product import ProductCreate, ProductUpdate, StockUpdate, SEED_PRODUCTS

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "StockUpdate",
    "SEED_PRODUCTS",
]
