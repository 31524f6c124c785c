import pytest
from fastapi.testclient import TestClient

from apparel_inventory.engine import InventoryEngine
from apparel_inventory.inventory_service import app
from apparel_inventory.models import Apparel, SizeVariant
from apparel_inventory.store import InMemoryInventoryStore


def seed_catalog():
    return [
        Apparel(code="TSHIRT001", sizes=[
            SizeVariant(size="S", quantity=10, price=15),
            SizeVariant(size="M", quantity=15, price=15),
            SizeVariant(size="L", quantity=5, price=15),
        ]),
        Apparel(code="JEANS001", sizes=[
            SizeVariant(size="30", quantity=8, price=45),
            SizeVariant(size="32", quantity=12, price=45),
            SizeVariant(size="34", quantity=6, price=45),
        ]),
    ]


@pytest.fixture
def store():
    return InMemoryInventoryStore(seed_catalog())


@pytest.fixture
def engine(store):
    return InventoryEngine(store)


@pytest.fixture
def client(engine):
    app.state.engine = engine
    return TestClient(app)
