# tests/test_sold_items.py
import pytest
from sqlalchemy.exc import SQLAlchemyError

from estate_sales.core import sale_lines


@pytest.fixture()
def empty_sale(client):
    response = client.post(
        "/api/sales",
        json={
            "customerID": 1,
            "saleDate": "2024-03-17",
            "totalAmount": 0,
            "paymentMethod": "Cash",
        },
    )
    return response.json()["saleID"]


def add_line(client, sale_id, item_id, unit_price, quantity=1):
    return client.post(
        "/api/solditems",
        json={
            "saleID": sale_id,
            "itemID": item_id,
            "unitPrice": unit_price,
            "quantity": quantity,
        },
    )


def sale_total(client, sale_id):
    return client.get(f"/api/sales/{sale_id}").json()["totalAmount"]


def test_add_line_marks_item_sold_and_sets_total(client, empty_sale):
    response = add_line(client, empty_sale, 5, 85.00)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Item added to sale successfully"}
    assert client.get("/api/items/5").json()["status"] == "Sold"
    assert sale_total(client, empty_sale) == 85.0


def test_add_line_failure_rolls_back_every_write(client, empty_sale, monkeypatch):
    counts = client.get("/api/debug/tables").json()

    def failing_recompute(db, sale_id):
        raise SQLAlchemyError("lost connection")

    monkeypatch.setattr(sale_lines, "recompute_sale_total", failing_recompute)

    response = add_line(client, empty_sale, 5, 85.00)

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Internal server error"}
    assert client.get("/api/items/5").json()["status"] == "Available"
    assert client.get(f"/api/solditems/{empty_sale}/5").status_code == 404
    assert sale_total(client, empty_sale) == 0
    assert client.get("/api/debug/tables").json() == counts

def test_total_is_sum_of_all_lines(client, empty_sale):
    add_line(client, empty_sale, 5, 85.00)
    add_line(client, empty_sale, 10, 40.25, quantity=2)
    add_line(client, empty_sale, 4, 700.00)

    assert sale_total(client, empty_sale) == 865.5

    lines = client.get(f"/api/sales/{empty_sale}/items").json()
    assert sum(line["unitPrice"] * line["quantity"] for line in lines) == 865.5


def test_add_line_overrides_manual_total(client):
    sale_id = client.post(
        "/api/sales",
        json={"customerID": 2, "saleDate": "2024-04-21", "totalAmount": 999, "paymentMethod": "Cash"},
    ).json()["saleID"]

    add_line(client, sale_id, 1, 400)

    assert sale_total(client, sale_id) == 400.0


def test_add_line_for_sold_item_changes_nothing(client, empty_sale):
    counts_before = client.get("/api/debug/tables").json()

    response = add_line(client, empty_sale, 2, 10.00)

    assert response.status_code == 400
    assert response.json()["message"] == "Item is already sold"
    assert client.get("/api/debug/tables").json() == counts_before
    assert sale_total(client, empty_sale) == 0


def test_add_line_unknown_sale(client):
    response = add_line(client, 999, 1, 10.00)

    assert response.status_code == 400
    assert response.json()["message"] == "Sale not found"


def test_add_line_unknown_item(client, empty_sale):
    response = add_line(client, empty_sale, 999, 10.00)

    assert response.status_code == 400
    assert response.json()["message"] == "Item not found"


def test_add_line_validates_numbers(client, empty_sale):
    assert add_line(client, empty_sale, 1, -1).status_code == 400
    assert add_line(client, empty_sale, 1, 10, quantity=0).status_code == 400
    assert client.get("/api/items/1").json()["status"] == "Available"


def test_add_line_missing_fields(client):
    response = client.post("/api/solditems", json={"saleID": 1})

    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields: unitPrice, quantity, itemID"


def test_update_line_recomputes_total(client, empty_sale):
    add_line(client, empty_sale, 5, 85.00)
    add_line(client, empty_sale, 1, 400.00)

    response = client.put(
        f"/api/solditems/{empty_sale}/5",
        json={"unitPrice": 100.00, "quantity": 2},
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Sold item updated successfully"
    assert sale_total(client, empty_sale) == 600.0

    line = client.get(f"/api/solditems/{empty_sale}/5").json()
    assert line["unitPrice"] == 100.0
    assert line["quantity"] == 2


def test_update_unknown_line_is_404(client):
    response = client.put("/api/solditems/1/5", json={"unitPrice": 1, "quantity": 1})

    assert response.status_code == 404
    assert response.json()["message"] == "Sold item record not found"


def test_update_line_requires_quantity(client):
    response = client.put("/api/solditems/1/2", json={"unitPrice": 1})

    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields: quantity"


def test_remove_line_releases_item_and_recomputes(client, empty_sale):
    add_line(client, empty_sale, 5, 85.00)
    add_line(client, empty_sale, 1, 400.00)

    response = client.delete(f"/api/solditems/{empty_sale}/5")

    assert response.status_code == 200
    assert response.json()["message"] == "Item removed from sale successfully"
    assert client.get("/api/items/5").json()["status"] == "Available"
    assert client.get("/api/items/1").json()["status"] == "Sold"
    assert sale_total(client, empty_sale) == 400.0


def test_remove_last_line_zeroes_total(client):
    response = client.delete("/api/solditems/2/6")

    assert response.status_code == 200
    assert sale_total(client, 2) == 0
    assert client.get("/api/items/6").json()["status"] == "Available"


def test_remove_unknown_line_is_404(client):
    assert client.delete("/api/solditems/1/5").status_code == 404


def test_item_can_be_resold_after_removal(client, empty_sale):
    client.delete("/api/solditems/2/6")

    response = add_line(client, empty_sale, 6, 70.00)

    assert response.status_code == 200
    assert sale_total(client, empty_sale) == 70.0
    assert client.get("/api/items/6").json()["status"] == "Sold"


def test_list_sold_items(client):
    lines = client.get("/api/solditems").json()

    assert len(lines) == 5
    first = lines[0]
    assert first["saleID"] == 3
    assert first["itemName"] == "1964 Kennedy Half Dollar"
    assert first["customerName"] == "Emily Rodriguez"
    assert first["eventTitle"] == "Coin & Jewelry Estate Sale"
    assert first["paymentMethod"] == "Check"
