# tests/test_events.py
from conftest import find

NEW_EVENT = {
    "title": "Lakeside Cottage Sale",
    "startDate": "2024-06-01",
    "endDate": "2024-06-02",
    "location": "12 Shore Road, Bend, OR",
    "description": "Fishing gear and cabin furniture",
}


def test_list_events_newest_first(client):
    response = client.get("/api/events")

    assert response.status_code == 200
    events = response.json()
    assert [event["eventID"] for event in events] == [3, 2, 1]
    assert events[0]["title"] == "Coin & Jewelry Estate Sale"
    assert events[0]["startDate"] == "2024-05-10"


def test_create_then_fetch_round_trip(client):
    created = client.post("/api/events", json=NEW_EVENT)

    assert created.status_code == 200
    body = created.json()
    assert body["success"] is True
    assert body["message"] == "Event created successfully"

    fetched = client.get(f"/api/events/{body['eventID']}").json()
    assert fetched == {"eventID": body["eventID"], **NEW_EVENT}


def test_create_event_missing_fields(client):
    response = client.post("/api/events", json={"title": "No dates"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Missing required fields: startDate, endDate, location"


def test_create_event_rejects_end_before_start(client):
    response = client.post(
        "/api/events",
        json={**NEW_EVENT, "startDate": "2024-06-05", "endDate": "2024-06-01"},
    )

    assert response.status_code == 400
    assert "End date cannot be before start date" in response.json()["message"]


def test_get_unknown_event_is_404(client):
    response = client.get("/api/events/999")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Event not found"}


def test_update_event(client):
    response = client.put("/api/events/1", json={**NEW_EVENT, "title": "Renamed"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Event updated successfully"}
    assert client.get("/api/events/1").json()["title"] == "Renamed"


def test_update_unknown_event_is_404(client):
    response = client.put("/api/events/999", json=NEW_EVENT)

    assert response.status_code == 404


def test_delete_event_reports_and_removes_its_items(client):
    items_before = client.get("/api/items").json()
    event_item_ids = {item["itemID"] for item in items_before if item["eventID"] == 3}
    assert len(event_item_ids) == 3

    response = client.delete("/api/events/3")

    assert response.status_code == 200
    assert response.json()["message"] == "Event deleted successfully (3 associated items also removed)"

    items_after = client.get("/api/items").json()
    assert len(items_after) == len(items_before) - 3
    assert not event_item_ids & {item["itemID"] for item in items_after}


def test_delete_event_recomputes_sales_that_lost_lines(client):
    # item 9 (event 3) is the only line of sale 3
    client.delete("/api/events/3")

    sale = client.get("/api/sales/3").json()
    assert sale["totalAmount"] == 0
    assert client.get("/api/sales/3/items").json() == []


def test_delete_event_without_items(client):
    event_id = client.post("/api/events", json=NEW_EVENT).json()["eventID"]

    response = client.delete(f"/api/events/{event_id}")

    assert response.json()["message"] == "Event deleted successfully"


def test_delete_unknown_event_is_404(client):
    assert client.delete("/api/events/999").status_code == 404


def test_events_dropdown_sorted_by_title(client):
    options = client.get("/api/events/dropdown").json()

    assert [option["title"] for option in options] == [
        "Coin & Jewelry Estate Sale",
        "Johnson Family Estate Sale",
        "Modern Art & Vintage Collection",
    ]
    assert find(options, "eventID", 1)["title"] == "Johnson Family Estate Sale"
