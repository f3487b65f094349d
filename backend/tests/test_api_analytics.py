"""Tests for analytics API endpoints."""


def spend(client, headers, product, price, date, **extra):
    payload = {
        "product_name": product,
        "price": price,
        "transaction_type": "Expense",
        "date": date,
    }
    payload.update(extra)
    response = client.post("/api/transactions", json=payload, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestSpendingTimeSeries:
    """Test GET /api/spending-time-series."""

    def test_same_day_transactions_are_summed(self, client, auth_headers):
        spend(client, auth_headers, "Milk", 2.99, "2025-01-08T08:15:00")
        spend(client, auth_headers, "Bread", 1.50, "2025-01-08T19:45:00")
        spend(client, auth_headers, "Eggs", 3.10, "2025-01-07T12:00:00")

        response = client.get("/api/spending-time-series", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == [
            {"date": "2025-01-07", "total_spending": 3.1},
            {"date": "2025-01-08", "total_spending": 4.49},
        ]

    def test_scoped_to_caller(self, client, auth_headers, other_auth_headers):
        spend(client, auth_headers, "Milk", 2.99, "2025-01-08T08:15:00")
        assert client.get("/api/spending-time-series", headers=other_auth_headers).json() == []


class TestCategorySpending:
    """Test GET /api/category-spending."""

    def test_groups_by_category_and_skips_uncategorized(self, client, auth_headers):
        client.post("/api/products", json={"name": "Milk", "category_name": "Groceries"}, headers=auth_headers)
        client.post("/api/products", json={"name": "Bus", "category_name": "Transport"}, headers=auth_headers)
        client.post("/api/categories", json={"name": "Unused"}, headers=auth_headers)

        spend(client, auth_headers, "Milk", 2.99, "2025-01-08T00:00:00")
        spend(client, auth_headers, "Milk", 3.01, "2025-01-09T00:00:00")
        spend(client, auth_headers, "Bus", 2.50, "2025-01-09T00:00:00")
        spend(client, auth_headers, "Gum", 1.00, "2025-01-09T00:00:00")

        response = client.get("/api/category-spending", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == [
            {"category_name": "Groceries", "total_spending": 6.0},
            {"category_name": "Transport", "total_spending": 2.5},
        ]

    def test_scoped_to_caller(self, client, auth_headers, other_auth_headers):
        client.post("/api/products", json={"name": "Milk", "category_name": "Groceries"}, headers=auth_headers)
        spend(client, auth_headers, "Milk", 2.99, "2025-01-08T00:00:00")
        assert client.get("/api/category-spending", headers=other_auth_headers).json() == []


class TestProductPriceData:
    """Test GET /api/product-price-data."""

    def test_price_history_in_order(self, client, auth_headers):
        for created_at, price in [("2025-02-01T09:00:00", 3.19), ("2025-01-01T09:00:00", 2.99)]:
            client.post("/api/product_prices", json={
                "product_name": "Milk", "price": price, "created_at": created_at
            }, headers=auth_headers)
        product_id = client.get("/api/products", headers=auth_headers).json()[0]["id"]

        response = client.get("/api/product-price-data", params={"product_id": product_id}, headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == [
            {"date": "2025-01-01", "price": 2.99},
            {"date": "2025-02-01", "price": 3.19},
        ]

    def test_other_users_product_yields_nothing(self, client, auth_headers, other_auth_headers):
        created = client.post("/api/product_prices", json={
            "product_name": "Milk", "price": 2.99, "created_at": "2025-01-01T00:00:00"
        }, headers=auth_headers).json()
        response = client.get(
            "/api/product-price-data",
            params={"product_id": created["product"]["id"]},
            headers=other_auth_headers
        )
        assert response.status_code == 200
        assert response.json() == []

    def test_product_id_is_required(self, client, auth_headers):
        response = client.get("/api/product-price-data", headers=auth_headers)
        assert response.status_code == 400
