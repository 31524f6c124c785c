# client.py
from urllib.parse import quote

import requests

BASE_URL = "http://localhost:8000"


class InventoryClient:
    """Thin wrapper over the inventory HTTP API. Returns decoded JSON as-is."""

    def __init__(self, base_url: str = BASE_URL, session: requests.Session | None = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/inventory{path}"

    def _send(self, method: str, path: str, payload=None):
        r = self.session.request(method, self._url(path), json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_stock(self, code: str, size: str, quantity: int, price: float) -> dict:
        return self._send("PUT", "/update", {"code": code, "size": size, "quantity": quantity, "price": price})

    def update_stock_batch(self, updates: list) -> list:
        return self._send("PUT", "/update-multiple", list(updates))

    def _order(self, items, order_id):
        order = {"items": list(items)}
        if order_id is not None:
            order["id"] = order_id
        return order

    def check_fulfillment(self, items: list, order_id: str | None = None) -> dict:
        return self._send("POST", "/check-fulfillment", self._order(items, order_id))

    def calculate_cost(self, items: list, order_id: str | None = None) -> dict:
        return self._send("POST", "/calculate-cost", self._order(items, order_id))

    def get_all(self) -> list:
        return self._send("GET", "")

    def get_by_code(self, code: str) -> dict | None:
        r = self.session.get(self._url("/" + quote(code, safe="")), timeout=self.timeout)
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()
