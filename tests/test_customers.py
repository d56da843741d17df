# tests/test_customers.py

NEW_CUSTOMER = {
    "firstName": "Nora",
    "lastName": "Quinn",
    "email": "nora.quinn@email.com",
    "phone": "(541) 555-0199",
}


def test_list_customers_sorted_by_last_name(client):
    customers = client.get("/api/customers").json()

    assert [c["lastName"] for c in customers] == [
        "Chen",
        "Johnson",
        "Martinez",
        "Rodriguez",
        "Thompson",
    ]
    assert "created_at" in customers[0]


def test_create_customer(client):
    response = client.post("/api/customers", json=NEW_CUSTOMER)

    assert response.status_code == 200
    customer_id = response.json()["customerID"]

    customer = client.get(f"/api/customers/{customer_id}").json()
    assert customer["email"] == "nora.quinn@email.com"
    assert customer["created_at"] is not None


def test_create_customer_invalid_email(client):
    response = client.post("/api/customers", json={**NEW_CUSTOMER, "email": "not-an-email"})

    assert response.status_code == 400
    assert "Invalid email format" in response.json()["message"]


def test_create_customer_duplicate_email(client):
    response = client.post(
        "/api/customers",
        json={**NEW_CUSTOMER, "email": "sarah.johnson@email.com"},
    )

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Email address already exists"}


def test_update_customer_keeps_own_email(client):
    response = client.put(
        "/api/customers/1",
        json={**NEW_CUSTOMER, "email": "sarah.johnson@email.com", "phone": "(503) 555-9999"},
    )

    assert response.status_code == 200
    assert client.get("/api/customers/1").json()["phone"] == "(503) 555-9999"


def test_update_customer_to_taken_email(client):
    response = client.put(
        "/api/customers/1",
        json={**NEW_CUSTOMER, "email": "michael.chen@email.com"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Email address already exists"


def test_update_unknown_customer_is_404(client):
    assert client.put("/api/customers/999", json=NEW_CUSTOMER).status_code == 404


def test_delete_customer_removes_sales_and_lines(client):
    # Sarah Johnson has sales 1 and 4, selling items 2 and 3
    response = client.delete("/api/customers/1")

    assert response.status_code == 200
    assert response.json()["message"] == "Customer deleted successfully (2 associated sales also removed)"

    sale_ids = {sale["saleID"] for sale in client.get("/api/sales").json()}
    assert sale_ids == {2, 3, 5}

    line_sales = {line["saleID"] for line in client.get("/api/solditems").json()}
    assert line_sales == {2, 3, 5}

    assert client.get("/api/items/2").json()["status"] == "Available"
    assert client.get("/api/items/3").json()["status"] == "Available"


def test_delete_customer_without_sales(client):
    response = client.delete("/api/customers/5")

    assert response.json()["message"] == "Customer deleted successfully"
    assert client.get("/api/customers/5").status_code == 404


def test_delete_unknown_customer_is_404(client):
    assert client.delete("/api/customers/999").status_code == 404


def test_customers_dropdown(client):
    options = client.get("/api/customers/dropdown").json()

    assert options[0] == {"customerID": 2, "fullName": "Michael Chen"}
    assert len(options) == 5
