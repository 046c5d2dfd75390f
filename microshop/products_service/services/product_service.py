"""
Product catalog business logic
"""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError
import structlog

from microshop.shared.utils.errors import ValidationError
from microshop.shared.utils.store import EntityStore, Record
from microshop.shared.utils.validators import apply_limit
from microshop.products_service.models.product import (
    ProductCreate, ProductUpdate, StockUpdate, SEED_PRODUCTS
)

logger = structlog.get_logger(__name__)


def create_product_store(seed=SEED_PRODUCTS) -> EntityStore:
    """Build the product store preloaded with the seed catalog"""
    return EntityStore(
        entity="Product",
        id_key="productId",
        create_schema=ProductCreate,
        update_schema=ProductUpdate,
        required_message="Name, price, and category are required",
        seed=seed
    )


def format_amount(value: float) -> str:
    """Two decimal places, as reported by the catalog endpoints"""
    return f"{value:.2f}"


def _average_price(products: List[Record]) -> float:
    if not products:
        return 0.0
    return sum(p["price"] for p in products) / len(products)


class ProductService:
    """Product catalog operations over one store"""

    def __init__(self, store: EntityStore):
        self.store = store

    def list_products(
        self,
        category: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        limit: Optional[int] = None
    ) -> List[Record]:
        """
        Filter the catalog

        Filters combine with AND: category is a case-insensitive exact match,
        price bounds are inclusive. The limit applies after filtering.
        """
        products = self.store.list()

        if category:
            wanted = category.lower()
            products = [p for p in products if p["category"].lower() == wanted]
        if min_price is not None:
            products = [p for p in products if p["price"] >= min_price]
        if max_price is not None:
            products = [p for p in products if p["price"] <= max_price]

        return apply_limit(products, limit)

    def search(self, query: str) -> List[Record]:
        """Case-insensitive substring match on name, description or category"""
        term = query.lower()
        return [
            p for p in self.store.list()
            if term in p["name"].lower()
            or term in p["description"].lower()
            or term in p["category"].lower()
        ]

    def get_categories(self) -> List[Dict[str, Any]]:
        """Distinct categories in first-seen order with count and average price"""
        by_category: Dict[str, List[Record]] = {}
        for product in self.store.list():
            by_category.setdefault(product["category"], []).append(product)

        return [
            {
                "name": name,
                "count": len(products),
                "averagePrice": format_amount(_average_price(products))
            }
            for name, products in by_category.items()
        ]

    def get_product(self, product_id: int) -> Record:
        return self.store.get(product_id)

    def create_product(self, payload: Dict[str, Any]) -> Record:
        product = self.store.create(payload)
        logger.info("Product created", product_id=product["id"], category=product["category"])
        return product

    def update_product(self, product_id: int, payload: Dict[str, Any]) -> Record:
        return self.store.update(product_id, payload)

    def delete_product(self, product_id: int) -> Record:
        return self.store.delete(product_id)

    def set_stock(self, product_id: int, payload: Dict[str, Any]) -> Record:
        """
        Set the absolute stock level

        ``quantity`` must be present; zero is a valid level.
        """
        self.store.get(product_id)

        if payload.get("quantity") is None:
            raise ValidationError("Quantity is required")
        try:
            stock = StockUpdate.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid value for 'quantity': {e.errors()[0]['msg']}") from e

        return self.store.update(product_id, {"stock": stock.quantity})

    def get_stats(self) -> Dict[str, Any]:
        """Catalog statistics"""
        products = self.store.list()

        by_category: Dict[str, int] = {}
        for product in products:
            by_category[product["category"]] = by_category.get(product["category"], 0) + 1

        return {
            "total": len(products),
            "totalValue": format_amount(sum(p["price"] * p["stock"] for p in products)),
            "averagePrice": format_amount(_average_price(products)),
            "totalStock": sum(p["stock"] for p in products),
            "byCategory": by_category
        }
