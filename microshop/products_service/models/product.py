"""
Product data models and seed records
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Upper bounds keep price * stock and catalog totals finite
MAX_PRICE = 1_000_000_000
MAX_STOCK = 1_000_000_000


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    name: str = Field(..., min_length=1, description="Product name")
    description: str = Field(default="", description="Free-text description")
    price: float = Field(
        ..., gt=0, le=MAX_PRICE, allow_inf_nan=False,
        description="Unit price, strictly positive"
    )
    category: str = Field(..., min_length=1, description="Catalog category")
    stock: int = Field(default=0, ge=0, le=MAX_STOCK, description="Units in stock")


class ProductUpdate(BaseModel):
    """Schema for updating a product; only supplied fields are applied"""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, gt=0, le=MAX_PRICE, allow_inf_nan=False)
    category: Optional[str] = Field(None, min_length=1)
    stock: Optional[int] = Field(None, ge=0, le=MAX_STOCK)

    @field_validator('name', 'description', 'price', 'category', 'stock', mode='before')
    @classmethod
    def reject_null(cls, v):
        """Supplied fields must carry a value"""
        if v is None:
            raise ValueError('Field must not be null')
        return v


class StockUpdate(BaseModel):
    """Absolute stock level"""
    quantity: int = Field(..., ge=0, le=MAX_STOCK)


SEED_PRODUCTS = [
    {
        "id": 1,
        "name": "Laptop Pro X1",
        "description": "High-performance laptop for professionals",
        "price": 1299.99,
        "category": "Electronics",
        "stock": 45,
        "createdAt": "2024-01-10T00:00:00.000Z"
    },
    {
        "id": 2,
        "name": "Wireless Mouse",
        "description": "Ergonomic wireless mouse with precision tracking",
        "price": 29.99,
        "category": "Accessories",
        "stock": 150,
        "createdAt": "2024-01-15T00:00:00.000Z"
    },
    {
        "id": 3,
        "name": "USB-C Hub",
        "description": "7-in-1 USB-C hub with HDMI, USB 3.0, and card reader",
        "price": 49.99,
        "category": "Accessories",
        "stock": 80,
        "createdAt": "2024-02-01T00:00:00.000Z"
    },
    {
        "id": 4,
        "name": "Mechanical Keyboard",
        "description": "RGB mechanical gaming keyboard with Cherry MX switches",
        "price": 159.99,
        "category": "Accessories",
        "stock": 60,
        "createdAt": "2024-02-05T00:00:00.000Z"
    },
    {
        "id": 5,
        "name": "4K Monitor",
        "description": "27-inch 4K IPS monitor with HDR support",
        "price": 399.99,
        "category": "Electronics",
        "stock": 25,
        "createdAt": "2024-02-10T00:00:00.000Z"
    }
]
