# tests/test_client.py
import pytest

from estate_sales.client import ApiError, EstateSaleClient


@pytest.fixture()
def api(client):
    notifications = []
    api = EstateSaleClient(
        "http://testserver",
        session=client,
        notify=lambda message, level="info": notifications.append((level, message)),
    )
    api.notifications = notifications
    return api


def test_list_and_get(api):
    events = api.events.list()

    assert len(events) == 3
    assert api.events.get(1)["title"] == "Johnson Family Estate Sale"


def test_create_notifies_success(api):
    result = api.customers.create(
        {"firstName": "Ada", "lastName": "Park", "email": "ada.park@email.com"}
    )

    assert result["success"] is True
    assert api.notifications[-1] == ("success", "Customer created successfully!")


def test_failure_raises_with_server_message(api):
    with pytest.raises(ApiError) as excinfo:
        api.items.delete(2)

    assert excinfo.value.status_code == 400
    assert excinfo.value.message.startswith("Cannot delete item that has been sold")
    assert api.notifications[-1][0] == "error"


def test_not_found_raises(api):
    with pytest.raises(ApiError) as excinfo:
        api.sales.get(999)

    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "Sale not found"


def test_sold_item_lines(api):
    sale = api.sales.create(
        {"customerID": 3, "saleDate": "2024-05-12", "paymentMethod": "Check"}
    )

    api.sold_items.create(
        {"saleID": sale["saleID"], "itemID": 8, "unitPrice": 600, "quantity": 1}
    )
    api.sold_items.update(sale["saleID"], 8, {"unitPrice": 620, "quantity": 1})

    assert api.sales.get(sale["saleID"])["totalAmount"] == 620.0
    assert api.sold_items.for_sale(sale["saleID"])[0]["itemName"] == "Gold Wedding Ring Set"

    api.sold_items.delete(sale["saleID"], 8)

    assert {item["itemID"] for item in api.available_items()} >= {8}


def test_dropdowns_and_counts(api):
    assert len(api.event_options()) == 3
    assert len(api.customer_options()) == 5
    assert api.table_counts()["soldItems"] == 5


def test_reset(api):
    api.events.delete(1)

    result = api.reset()

    assert result["success"] is True
    assert api.table_counts()["events"] == 3
