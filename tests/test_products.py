"""
Products service route tests
"""

import pytest


class TestListProducts:
    """GET /products"""

    def test_list_all(self, products_client):
        data = products_client.get("/products").json()
        assert data["count"] == 5
        assert data["products"][0]["name"] == "Laptop Pro X1"

    def test_category_is_case_insensitive(self, products_client):
        data = products_client.get("/products", params={"category": "accessories"}).json()
        assert data["count"] == 3
        assert {p["category"] for p in data["products"]} == {"Accessories"}

    def test_price_range_is_inclusive(self, products_client):
        data = products_client.get("/products", params={"minPrice": "100", "maxPrice": "200"}).json()
        assert all(100 <= p["price"] <= 200 for p in data["products"])
        assert [p["name"] for p in data["products"]] == ["Mechanical Keyboard"]

        data = products_client.get("/products", params={"minPrice": "29.99", "maxPrice": "49.99"}).json()
        assert [p["id"] for p in data["products"]] == [2, 3]

    def test_filters_combine(self, products_client):
        data = products_client.get(
            "/products",
            params={"minPrice": "0", "maxPrice": "1000", "category": "Accessories"}
        ).json()
        assert [p["id"] for p in data["products"]] == [2, 3, 4]

        data = products_client.get(
            "/products",
            params={"minPrice": "100", "maxPrice": "200", "category": "Electronics"}
        ).json()
        assert data["count"] == 0

    def test_limit_applies_after_filtering(self, products_client):
        data = products_client.get("/products", params={"category": "Accessories", "limit": "2"}).json()
        assert [p["id"] for p in data["products"]] == [2, 3]

    def test_non_numeric_bound_ignored(self, products_client):
        data = products_client.get("/products", params={"minPrice": "cheap"}).json()
        assert data["count"] == 5


class TestGetProduct:
    """GET /products/:id"""

    def test_get_existing(self, products_client):
        response = products_client.get("/products/5")
        assert response.status_code == 200
        assert response.json()["name"] == "4K Monitor"

    def test_get_missing(self, products_client):
        response = products_client.get("/products/77")
        assert response.status_code == 404
        assert response.json() == {"error": "Product not found", "productId": 77}


class TestSearch:
    """GET /search"""

    def test_search_by_name(self, products_client):
        data = products_client.get("/search", params={"q": "LAPTOP"}).json()
        assert data["query"] == "LAPTOP"
        assert [p["id"] for p in data["products"]] == [1]

    def test_search_by_description(self, products_client):
        data = products_client.get("/search", params={"q": "cherry mx"}).json()
        assert [p["name"] for p in data["products"]] == ["Mechanical Keyboard"]

    def test_search_by_category(self, products_client):
        data = products_client.get("/search", params={"q": "electronics"}).json()
        assert data["count"] == 2

    @pytest.mark.parametrize("params", [{}, {"q": ""}])
    def test_query_required(self, products_client, params):
        response = products_client.get("/search", params=params)
        assert response.status_code == 400
        assert response.json() == {"error": "Search query is required", "usage": "/search?q=laptop"}


def test_categories(products_client):
    data = products_client.get("/categories").json()

    assert data["count"] == 2
    assert data["categories"] == [
        {"name": "Electronics", "count": 2, "averagePrice": "849.99"},
        {"name": "Accessories", "count": 3, "averagePrice": "79.99"},
    ]


class TestCreateProduct:
    """POST /products"""

    def test_create(self, products_client, sample_product):
        response = products_client.post("/products", json=sample_product)
        assert response.status_code == 201

        product = response.json()["product"]
        assert product["id"] == 6
        assert product["description"] == ""
        assert product["stock"] == 12

    def test_defaults(self, products_client):
        product = products_client.post(
            "/products", json={"name": "Cable", "price": "9.99", "category": "Accessories"}
        ).json()["product"]

        assert product["price"] == 9.99
        assert product["stock"] == 0
        assert product["description"] == ""

    @pytest.mark.parametrize("price", [0, -10, -0.01])
    def test_non_positive_price_rejected(self, products_client, price):
        response = products_client.post(
            "/products", json={"name": "Bad", "price": price, "category": "Misc"}
        )
        assert response.status_code == 400
        assert products_client.get("/products").json()["count"] == 5

    def test_missing_fields(self, products_client):
        response = products_client.post("/products", json={"name": "No price"})
        assert response.status_code == 400
        assert response.json()["error"] == "Name, price, and category are required"

    def test_negative_stock_rejected(self, products_client, sample_product):
        response = products_client.post("/products", json={**sample_product, "stock": -1})
        assert response.status_code == 400

    @pytest.mark.parametrize("raw_price", [b"1e400", b'"inf"', b'"NaN"'])
    def test_non_finite_price_rejected(self, products_client, raw_price):
        response = products_client.post(
            "/products",
            content=b'{"name": "Huge", "category": "Misc", "price": ' + raw_price + b"}",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid value for 'price'")

        listing = products_client.get("/products")
        assert listing.status_code == 200
        assert listing.json()["count"] == 5

    def test_oversized_price_rejected(self, products_client):
        response = products_client.post(
            "/products", json={"name": "Huge", "category": "Misc", "price": 1e308, "stock": 2}
        )
        assert response.status_code == 400
        assert products_client.get("/stats/products").json()["totalValue"] == "86596.40"


class TestUpdateProduct:
    """PUT /products/:id"""

    def test_partial_update(self, products_client):
        response = products_client.put("/products/2", json={"price": 24.99})
        assert response.status_code == 200

        product = products_client.get("/products/2").json()
        assert product["price"] == 24.99
        assert product["name"] == "Wireless Mouse"
        assert "updatedAt" in product

    def test_zero_stock_and_empty_description_applied(self, products_client):
        products_client.put("/products/3", json={"stock": 0, "description": ""})

        product = products_client.get("/products/3").json()
        assert product["stock"] == 0
        assert product["description"] == ""

    def test_invalid_price_rejected(self, products_client):
        response = products_client.put("/products/1", json={"price": 0})
        assert response.status_code == 400
        assert products_client.get("/products/1").json()["price"] == 1299.99

    @pytest.mark.parametrize("raw_price", [b"1e400", b'"inf"'])
    def test_non_finite_price_update_rejected(self, products_client, raw_price):
        response = products_client.put(
            "/products/1",
            content=b'{"price": ' + raw_price + b"}",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400

        product = products_client.get("/products/1")
        assert product.status_code == 200
        assert product.json()["price"] == 1299.99
        assert products_client.get("/products").status_code == 200
        assert products_client.get("/categories").status_code == 200
        assert products_client.get("/stats/products").status_code == 200

    def test_null_field_rejected(self, products_client):
        response = products_client.put("/products/2", json={"name": None})
        assert response.status_code == 400
        assert products_client.get("/products/2").json()["name"] == "Wireless Mouse"

    def test_update_missing(self, products_client):
        response = products_client.put("/products/99", json={"name": "Ghost"})
        assert response.status_code == 404


class TestDeleteProduct:
    """DELETE /products/:id"""

    def test_delete(self, products_client):
        response = products_client.delete("/products/4")
        assert response.status_code == 200
        assert response.json()["product"]["name"] == "Mechanical Keyboard"
        assert products_client.get("/products/4").status_code == 404

    def test_delete_missing(self, products_client):
        assert products_client.delete("/products/99").status_code == 404


class TestStock:
    """PATCH /products/:id/stock"""

    def test_set_zero(self, products_client):
        response = products_client.patch("/products/1/stock", json={"quantity": 0})
        assert response.status_code == 200
        assert response.json()["message"] == "Stock updated successfully"
        assert products_client.get("/products/1").json()["stock"] == 0

    def test_absolute_set(self, products_client):
        products_client.patch("/products/2/stock", json={"quantity": 7})
        assert products_client.get("/products/2").json()["stock"] == 7

    def test_quantity_required(self, products_client):
        response = products_client.patch("/products/1/stock", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Quantity is required"}
        assert products_client.get("/products/1").json()["stock"] == 45

    def test_negative_quantity(self, products_client):
        response = products_client.patch("/products/1/stock", json={"quantity": -3})
        assert response.status_code == 400

    def test_missing_product(self, products_client):
        response = products_client.patch("/products/99/stock", json={"quantity": 1})
        assert response.status_code == 404


class TestProductStats:
    """GET /stats/products"""

    def test_seed_stats(self, products_client):
        data = products_client.get("/stats/products").json()

        assert data["total"] == 5
        assert data["totalStock"] == 45 + 150 + 80 + 60 + 25
        assert data["totalValue"] == "86596.40"
        assert data["averagePrice"] == "387.99"
        assert data["byCategory"] == {"Electronics": 2, "Accessories": 3}

    def test_empty_catalog(self, products_client):
        for product_id in range(1, 6):
            products_client.delete(f"/products/{product_id}")

        data = products_client.get("/stats/products").json()
        assert data["total"] == 0
        assert data["averagePrice"] == "0.00"
        assert data["totalValue"] == "0.00"
        assert data["byCategory"] == {}
