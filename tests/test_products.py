"""Tests for Product API endpoints."""

PROBLEM_JSON = "application/problem+json"


def test_list_products_returns_seeded_products(client):
    """Test listing products returns the three samples in insertion order."""
    response = client.get("/api/products/")

    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data] == [1, 2, 3]
    assert [p["name"] for p in data] == ["Laptop", "Mouse", "Keyboard"]
    assert data[0]["price"] == 999.99
    assert data[0]["stockQuantity"] == 50
    assert data[0]["updatedAt"] is None


def test_create_product(client):
    """Test creating a new product."""
    response = client.post(
        "/api/products/",
        json={
            "name": "Widget",
            "price": 9.99,
            "stockQuantity": 10
        }
    )

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == 4
    assert data["name"] == "Widget"
    assert data["description"] is None
    assert data["price"] == 9.99
    assert data["stockQuantity"] == 10
    assert data["createdAt"]
    assert data["updatedAt"] is None
    assert response.headers["location"].endswith("/api/products/4")


def test_created_product_is_readable_at_location(client):
    """Test the Location header points at the created product."""
    create_response = client.post(
        "/api/products/",
        json={"name": "Cable", "description": "USB-C", "price": 5, "stockQuantity": 3}
    )

    response = client.get(create_response.headers["location"])

    assert response.status_code == 200
    assert response.json() == create_response.json()


def test_create_product_ids_keep_increasing(client):
    """Test ids are never reused, even after a delete."""
    first = client.post("/api/products/", json={"name": "A", "price": 1, "stockQuantity": 1}).json()
    client.delete(f"/api/products/{first['id']}")
    second = client.post("/api/products/", json={"name": "B", "price": 1, "stockQuantity": 1}).json()

    assert second["id"] > first["id"] > 3


def test_create_product_collects_all_validation_errors(client):
    """Test every invalid field is reported, not just the first."""
    response = client.post(
        "/api/products/",
        json={"name": "", "price": -1, "stockQuantity": -1}
    )

    assert response.status_code == 400
    assert response.headers["content-type"].startswith(PROBLEM_JSON)
    data = response.json()
    assert data["status"] == 400
    assert data["title"] == "One or more validation errors occurred."
    assert data["type"] == "https://tools.ietf.org/html/rfc9110#section-15.5.1"
    assert data["detail"]
    assert set(data["errors"]) == {"Name", "Price", "StockQuantity"}
    assert data["errors"]["Name"] == ["The Name field is required."]


def test_create_product_missing_name(client):
    """Test a body without a name is rejected."""
    response = client.post("/api/products/", json={"price": 10, "stockQuantity": 1})

    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"Name"}


def test_create_product_whitespace_name(client):
    """Test a whitespace-only name counts as missing."""
    response = client.post("/api/products/", json={"name": "   ", "price": 10, "stockQuantity": 1})

    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"Name"}
    assert len(client.get("/api/products/").json()) == 3


def test_create_product_wrong_type(client):
    """Test a non-numeric stock quantity is reported as a validation problem."""
    response = client.post(
        "/api/products/",
        json={"name": "Widget", "price": 1, "stockQuantity": "lots"}
    )

    assert response.status_code == 400
    assert "StockQuantity" in response.json()["errors"]


def test_create_product_malformed_json(client):
    """Test malformed JSON yields a problem response."""
    response = client.post(
        "/api/products/",
        content="{not json",
        headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    data = response.json()
    assert data["status"] == 400
    assert "body" in data["errors"]


def test_get_product(client):
    """Test getting a product by ID."""
    response = client.get("/api/products/2")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 2
    assert data["name"] == "Mouse"
    assert data["description"] == "Wireless ergonomic mouse"


def test_get_product_not_found(client):
    """Test getting non-existent product returns 404 problem details."""
    response = client.get("/api/products/999")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith(PROBLEM_JSON)
    data = response.json()
    assert data["status"] == 404
    assert data["title"] == "Product not found"
    assert "999" in data["detail"]
    assert data["type"] == "https://tools.ietf.org/html/rfc9110#section-15.5.5"


def test_update_product(client):
    """Test updating a product replaces its fields and stamps updatedAt."""
    original = client.get("/api/products/1").json()

    response = client.put(
        "/api/products/1",
        json={"name": "Gaming Laptop", "description": None, "price": 1299.5, "stockQuantity": 5}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["name"] == "Gaming Laptop"
    assert data["description"] is None
    assert data["price"] == 1299.5
    assert data["stockQuantity"] == 5
    assert data["createdAt"] == original["createdAt"]
    assert data["updatedAt"] is not None


def test_update_then_get_round_trip(client):
    """Test an update is visible on a subsequent read."""
    client.put(
        "/api/products/3",
        json={"name": "Compact Keyboard", "description": "60% layout", "price": 89.0, "stockQuantity": 12}
    )

    data = client.get("/api/products/3").json()

    assert data["name"] == "Compact Keyboard"
    assert data["description"] == "60% layout"
    assert data["price"] == 89.0
    assert data["stockQuantity"] == 12
    assert data["updatedAt"] is not None


def test_update_product_not_found(client):
    """Test updating a missing product returns 404 and leaves the store alone."""
    before = client.get("/api/products/").json()

    response = client.put(
        "/api/products/999",
        json={"name": "Ghost", "price": 1, "stockQuantity": 1}
    )

    assert response.status_code == 404
    assert "999" in response.json()["detail"]
    assert client.get("/api/products/").json() == before


def test_update_product_validation(client):
    """Test update validation reports every invalid field."""
    response = client.put(
        "/api/products/1",
        json={"name": "", "price": -1, "stockQuantity": -1}
    )

    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"Name", "Price", "StockQuantity"}
    assert client.get("/api/products/1").json()["name"] == "Laptop"


def test_delete_product(client):
    """Test deleting a product."""
    response = client.delete("/api/products/2")
    assert response.status_code == 204
    assert response.content == b""

    # Verify it's deleted
    get_response = client.get("/api/products/2")
    assert get_response.status_code == 404
    assert [p["id"] for p in client.get("/api/products/").json()] == [1, 3]


def test_delete_product_not_found(client):
    """Test deleting a missing product returns 404 problem details."""
    response = client.delete("/api/products/999")

    assert response.status_code == 404
    assert response.json()["title"] == "Product not found"


def test_create_product_price_out_of_range(client):
    """Test a price too large to represent is rejected and nothing is stored."""
    response = client.post(
        "/api/products/",
        json={"name": "X", "price": "1e400", "stockQuantity": 1}
    )

    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"Price"}
    assert len(client.get("/api/products/").json()) == 3


def test_type_error_uses_same_key_as_rule_error(client):
    """Test a type error and a rule error on one field share the field key."""
    type_error = client.post(
        "/api/products/",
        json={"name": "Widget", "price": 1, "stockQuantity": "lots"}
    )
    rule_error = client.post(
        "/api/products/",
        json={"name": "Widget", "price": 1, "stockQuantity": -1}
    )

    assert set(type_error.json()["errors"]) == set(rule_error.json()["errors"]) == {"StockQuantity"}


def test_get_product_non_integer_id(client):
    """Test a non-numeric id matches no route and is answered with 404."""
    response = client.get("/api/products/abc")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith(PROBLEM_JSON)
    data = response.json()
    assert data["status"] == 404
    assert data["type"] == "https://tools.ietf.org/html/rfc9110#section-15.5.5"
    assert "errors" not in data
