import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.store import Store

PENDING_ORDER_ID = "8d5a1b7c2e4f4a0b9c6d3e2f1a0b9c8d"
OUT_FOR_DELIVERY_ORDER_ID = "f6069a542257054114138301947672ba"
DELIVERED_ORDER_ID = "5a887d326e83d3c5bdcbee398ea32aff"
SEED_DISH_ID = "3c637d011d844ebab1205fef8a7e36ea"


@pytest.fixture
def settings():
    return Settings(_env_file=None, seed_data=True)


@pytest.fixture
def store():
    return Store.seeded()


@pytest.fixture
def client(settings, store):
    with TestClient(create_app(settings, store)) as test_client:
        yield test_client


@pytest.fixture
def dish_payload():
    return {
        "data": {
            "name": "Pasta",
            "description": "d",
            "price": 12,
            "image_url": "u",
        }
    }


@pytest.fixture
def order_payload():
    return {
        "data": {
            "deliverTo": "308 Negra Arroyo Lane",
            "mobileNumber": "(505) 143-3369",
            "dishes": [
                {"dishId": SEED_DISH_ID, "name": "Stir fry", "price": 15, "quantity": 2},
                {"dishId": "90c3d873684bf381dfab29034b5bba73", "quantity": 1},
            ],
        }
    }
