from unittest.mock import MagicMock

import pytest
import requests

from apparel_inventory.client import InventoryClient


def _response(status_code=200, payload=None):
    r = MagicMock()
    r.status_code = status_code
    r.json.return_value = payload
    if status_code >= 400:
        r.raise_for_status.side_effect = requests.HTTPError(f"{status_code} error")
    return r


def test_update_stock_sends_put():
    session = MagicMock()
    session.request.return_value = _response(payload={"code": "HOODIE001", "sizes": []})
    client = InventoryClient("http://inventory:8000/", session=session, timeout=3)

    assert client.update_stock("HOODIE001", "L", 12, 30) == {"code": "HOODIE001", "sizes": []}
    session.request.assert_called_once_with(
        "PUT", "http://inventory:8000/api/inventory/update",
        json={"code": "HOODIE001", "size": "L", "quantity": 12, "price": 30}, timeout=3,
    )


def test_calculate_cost_posts_order():
    session = MagicMock()
    session.request.return_value = _response(payload={"canFulfill": True, "totalCost": 75})
    client = InventoryClient(session=session)
    items = [{"code": "TSHIRT001", "size": "M", "quantity": 2}]

    assert client.calculate_cost(items, order_id="order-1")["totalCost"] == 75
    session.request.assert_called_once_with(
        "POST", "http://localhost:8000/api/inventory/calculate-cost",
        json={"id": "order-1", "items": items}, timeout=10.0,
    )


def test_order_without_id_omits_key():
    session = MagicMock()
    session.request.return_value = _response(payload={"canFulfill": True, "missingItems": []})
    items = [{"code": "TSHIRT001", "size": "M", "quantity": 1}]

    InventoryClient(session=session).check_fulfillment(items)

    assert session.request.call_args.kwargs["json"] == {"items": items}


def test_get_by_code_not_found_returns_none():
    session = MagicMock()
    session.get.return_value = _response(404)

    assert InventoryClient(session=session).get_by_code("NOPE") is None


def test_get_by_code_quotes_path():
    session = MagicMock()
    session.get.return_value = _response(payload={"code": "A/B", "sizes": []})

    InventoryClient(session=session).get_by_code("A/B")

    assert session.get.call_args.args[0] == "http://localhost:8000/api/inventory/A%2FB"


def test_server_errors_raise():
    session = MagicMock()
    session.request.return_value = _response(500)

    with pytest.raises(requests.HTTPError):
        InventoryClient(session=session).get_all()


def test_against_running_app(client):
    api = InventoryClient("http://testserver", session=client)

    api.update_stock_batch([{"code": "HOODIE001", "size": "L", "quantity": 12, "price": 30}])

    assert api.get_by_code("HOODIE001")["sizes"] == [{"size": "L", "quantity": 12, "price": 30}]
    assert api.check_fulfillment([{"code": "HOODIE001", "size": "L", "quantity": 13}])["canFulfill"] is False
    assert [a["code"] for a in api.get_all()] == ["TSHIRT001", "JEANS001", "HOODIE001"]
