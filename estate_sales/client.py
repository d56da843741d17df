# estate_sales/client.py
"""HTTP client for the estate sale API.

One facade per entity translating responses into plain Python values. A
failed call logs the server's message, hands it to the ``notify`` callback
and raises ``ApiError`` so the caller can react.
"""
import logging

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _log_notification(message: str, level: str = "info"):
    if level == "error":
        logger.error(message)
    else:
        logger.info(message)


class EntityClient:
    def __init__(self, api: "EstateSaleClient", path: str, label: str):
        self.api = api
        self.path = path
        self.label = label

    def list(self):
        return self.api.request("GET", self.path)

    def get(self, entity_id: int):
        return self.api.request("GET", f"{self.path}/{entity_id}")

    def create(self, data: dict):
        result = self.api.request("POST", self.path, json=data)
        self.api.notify(f"{self.label} created successfully!", "success")
        return result

    def update(self, entity_id: int, data: dict):
        result = self.api.request("PUT", f"{self.path}/{entity_id}", json=data)
        self.api.notify(f"{self.label} updated successfully!", "success")
        return result

    def delete(self, entity_id: int):
        result = self.api.request("DELETE", f"{self.path}/{entity_id}")
        self.api.notify(result.get("message", f"{self.label} deleted successfully!"), "success")
        return result


class SoldItemsClient(EntityClient):
    # Lines are addressed by (saleID, itemID)

    def get(self, sale_id: int, item_id: int):
        return self.api.request("GET", f"{self.path}/{sale_id}/{item_id}")

    def update(self, sale_id: int, item_id: int, data: dict):
        result = self.api.request("PUT", f"{self.path}/{sale_id}/{item_id}", json=data)
        self.api.notify("Sold item updated successfully!", "success")
        return result

    def delete(self, sale_id: int, item_id: int):
        result = self.api.request("DELETE", f"{self.path}/{sale_id}/{item_id}")
        self.api.notify(result.get("message", "Item removed from sale"), "success")
        return result

    def for_sale(self, sale_id: int):
        return self.api.request("GET", f"sales/{sale_id}/items")


class EstateSaleClient:
    def __init__(self, base_url: str, session=None, timeout: float = 60, notify=None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.notify = notify or _log_notification

        self.events = EntityClient(self, "events", "Event")
        self.items = EntityClient(self, "items", "Item")
        self.customers = EntityClient(self, "customers", "Customer")
        self.sales = EntityClient(self, "sales", "Sale")
        self.sold_items = SoldItemsClient(self, "solditems", "Sold item")

    def request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}/api/{path}"
        response = self.session.request(method, url, timeout=self.timeout, **kwargs)

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 400:
            message = None
            if isinstance(payload, dict):
                message = payload.get("message") or payload.get("error")
            message = message or f"HTTP {response.status_code}"

            logger.error(f"{method} {url} failed: {message}")
            self.notify(message, "error")
            raise ApiError(response.status_code, message)

        return payload

    # Dropdown sources

    def event_options(self):
        return self.request("GET", "events/dropdown")

    def customer_options(self):
        return self.request("GET", "customers/dropdown")

    def available_items(self):
        return self.request("GET", "items/available")

    # Maintenance

    def table_counts(self):
        return self.request("GET", "debug/tables")

    def reset(self):
        result = self.request("POST", "reset")
        self.notify(result.get("message", "Database reset"), "success")
        return result
