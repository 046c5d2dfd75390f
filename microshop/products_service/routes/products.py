"""
Product catalog routes
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request
import structlog

from microshop.shared.utils.errors import ServiceError
from microshop.shared.utils.validators import parse_limit, parse_number
from microshop.products_service.services.product_service import ProductService

logger = structlog.get_logger(__name__)

router = APIRouter()


def get_product_service(request: Request) -> ProductService:
    """Dependency to get the product service instance"""
    return request.app.state.product_service


@router.get("/products")
async def list_products(
    category: Optional[str] = Query(None, description="Case-insensitive category"),
    min_price: Optional[str] = Query(None, alias="minPrice", description="Inclusive lower price bound"),
    max_price: Optional[str] = Query(None, alias="maxPrice", description="Inclusive upper price bound"),
    limit: Optional[str] = Query(None, description="Maximum number of products"),
    service: ProductService = Depends(get_product_service)
):
    """List products"""
    products = service.list_products(
        category=category,
        min_price=parse_number(min_price),
        max_price=parse_number(max_price),
        limit=parse_limit(limit)
    )
    return {"count": len(products), "products": products}


@router.get("/products/{product_id}")
async def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """Get product details"""
    try:
        return service.get_product(product_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())


@router.get("/search")
async def search_products(
    q: Optional[str] = Query(None, description="Search term"),
    service: ProductService = Depends(get_product_service)
):
    """Search products by name, description or category"""
    if not q:
        raise HTTPException(
            status_code=400,
            detail={"error": "Search query is required", "usage": "/search?q=laptop"}
        )

    products = service.search(q)
    return {"query": q, "count": len(products), "products": products}


@router.get("/categories")
async def list_categories(service: ProductService = Depends(get_product_service)):
    """List categories with product counts and average prices"""
    categories = service.get_categories()
    return {"count": len(categories), "categories": categories}


@router.post("/products", status_code=201)
async def create_product(
    payload: Optional[Dict[str, Any]] = Body(None),
    service: ProductService = Depends(get_product_service)
):
    """Create a new product"""
    try:
        product = service.create_product(payload or {})
    except ServiceError as e:
        logger.warning("Product creation rejected", error=e.message, status_code=e.status_code)
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())

    return {"message": "Product created successfully", "product": product}


@router.put("/products/{product_id}")
async def update_product(
    product_id: int,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: ProductService = Depends(get_product_service)
):
    """Update product information"""
    try:
        product = service.update_product(product_id, payload or {})
    except ServiceError as e:
        logger.warning("Product update rejected", product_id=product_id, error=e.message)
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())

    return {"message": "Product updated successfully", "product": product}


@router.delete("/products/{product_id}")
async def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """Delete a product"""
    try:
        product = service.delete_product(product_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())

    return {"message": "Product deleted successfully", "product": product}


@router.patch("/products/{product_id}/stock")
async def update_stock(
    product_id: int,
    payload: Optional[Dict[str, Any]] = Body(None),
    service: ProductService = Depends(get_product_service)
):
    """Set the stock level of a product"""
    try:
        product = service.set_stock(product_id, payload or {})
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())

    return {"message": "Stock updated successfully", "product": product}


@router.get("/stats/products")
async def product_stats(service: ProductService = Depends(get_product_service)):
    """Get catalog statistics"""
    return service.get_stats()
