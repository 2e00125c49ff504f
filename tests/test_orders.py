import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.store import Store
from tests.conftest import (
    DELIVERED_ORDER_ID,
    OUT_FOR_DELIVERY_ORDER_ID,
    PENDING_ORDER_ID,
)

QUANTITY_ERROR = (
    "Dish {index} must have a quantity that is an integer greater than 0. "
    "The quantity ordered was: {total}"
)


def update_payload(order_payload, status="preparing", **extra):
    order_payload["data"]["status"] = status
    order_payload["data"].update(extra)
    return order_payload


def test_list_orders(client):
    response = client.get("/orders")

    assert response.status_code == 200
    assert len(response.json()["data"]) == 3


def test_list_orders_by_status(client):
    response = client.get("/orders", params={"status": "pending"})

    assert response.status_code == 200
    assert [order["id"] for order in response.json()["data"]] == [PENDING_ORDER_ID]


def test_list_orders_with_unknown_status(client):
    response = client.get("/orders", params={"status": "lost"})

    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid status.")


class TestCreate:

    def test_create_defaults_to_pending(self, client, order_payload):
        response = client.post("/orders", json=order_payload)

        assert response.status_code == 201
        order = response.json()["data"]
        assert order["status"] == "pending"
        assert order["dishes"] == order_payload["data"]["dishes"]
        assert client.get(f"/orders/{order['id']}").json()["data"] == order

    def test_create_keeps_supplied_status(self, client, order_payload):
        order_payload["data"]["status"] = "preparing"

        response = client.post("/orders", json=order_payload)

        assert response.json()["data"]["status"] == "preparing"

    @pytest.mark.parametrize("field,message", [
        ("deliverTo", "Order must include a deliverTo"),
        ("mobileNumber", "Order must include a mobileNumber"),
        ("dishes", "Order must include a dish"),
    ])
    def test_missing_field(self, client, store, order_payload, field, message):
        del order_payload["data"][field]

        response = client.post("/orders", json=order_payload)

        assert response.status_code == 400
        assert response.json() == {"error": message}
        assert len(store.orders) == 3

    @pytest.mark.parametrize("dishes", [[], "pizza", {"dishId": "a", "quantity": 1}])
    def test_dishes_must_be_non_empty_list(self, client, store, order_payload, dishes):
        order_payload["data"]["dishes"] = dishes

        response = client.post("/orders", json=order_payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Order must include at least one dish"
        assert len(store.orders) == 3

    @pytest.mark.parametrize("quantity", [0, -3, "2", None])
    def test_bad_quantity_names_first_index(self, client, store, order_payload, quantity):
        order_payload["data"]["dishes"][1]["quantity"] = quantity

        response = client.post("/orders", json=order_payload)

        assert response.status_code == 400
        assert response.json()["error"] == QUANTITY_ERROR.format(index=1, total=2)
        assert len(store.orders) == 3

    def test_missing_quantity(self, client, order_payload):
        del order_payload["data"]["dishes"][0]["quantity"]

        response = client.post("/orders", json=order_payload)

        assert response.status_code == 400
        assert response.json()["error"] == QUANTITY_ERROR.format(index=0, total=1)

    @pytest.mark.parametrize("status", ["invalid", "lost"])
    def test_create_stores_status_outside_workflow(self, client, order_payload, status):
        order_payload["data"]["status"] = status

        response = client.post("/orders", json=order_payload)

        assert response.status_code == 201
        order_id = response.json()["data"]["id"]
        assert client.get(f"/orders/{order_id}").json()["data"]["status"] == status

    def test_created_ids_are_unique(self, client, order_payload):
        ids = {
            client.post("/orders", json=order_payload).json()["data"]["id"]
            for _ in range(10)
        }

        assert len(ids) == 10


def test_read_unknown_order(client):
    response = client.get("/orders/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "nope doesn't exist."}


class TestUpdate:

    def test_update_replaces_every_field(self, client, order_payload):
        payload = update_payload(order_payload, "out-for-delivery")

        response = client.put(f"/orders/{PENDING_ORDER_ID}", json=payload)

        assert response.status_code == 200
        assert response.json()["data"] == {"id": PENDING_ORDER_ID, **payload["data"]}

    def test_update_with_matching_body_id(self, client, order_payload):
        payload = update_payload(order_payload, id=PENDING_ORDER_ID)

        response = client.put(f"/orders/{PENDING_ORDER_ID}", json=payload)

        assert response.status_code == 200
        assert response.json()["data"]["id"] == PENDING_ORDER_ID

    def test_update_with_mismatched_body_id(self, client, order_payload):
        before = client.get(f"/orders/{PENDING_ORDER_ID}").json()["data"]
        payload = update_payload(order_payload, id="other")

        response = client.put(f"/orders/{PENDING_ORDER_ID}", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == (
            f"Order id does not match route id. Order: other, Route: {PENDING_ORDER_ID}."
        )
        assert client.get(f"/orders/{PENDING_ORDER_ID}").json()["data"] == before

    def test_status_is_required(self, client, order_payload):
        response = client.put(f"/orders/{PENDING_ORDER_ID}", json=order_payload)

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Order must have a status of pending, preparing, out-for-delivery, delivered"
        )

    @pytest.mark.parametrize("status", ["", None])
    def test_status_must_not_be_blank(self, client, order_payload, status):
        payload = update_payload(order_payload, status)

        response = client.put(f"/orders/{PENDING_ORDER_ID}", json=payload)

        assert response.status_code == 400

    def test_invalid_status_sentinel_is_rejected(self, client, order_payload):
        payload = update_payload(order_payload, "invalid")

        response = client.put(f"/orders/{PENDING_ORDER_ID}", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Delivery status invalid: a delivered order cannot be changed"
        )

    def test_delivered_orders_can_change_by_default(self, client, order_payload):
        payload = update_payload(order_payload, "pending")

        response = client.put(f"/orders/{DELIVERED_ORDER_ID}", json=payload)

        assert response.status_code == 200

    def test_field_checks_run_before_status(self, client, order_payload):
        payload = update_payload(order_payload, "")
        payload["data"]["dishes"] = []

        response = client.put(f"/orders/{PENDING_ORDER_ID}", json=payload)

        assert response.json()["error"] == "Order must include at least one dish"

    def test_update_unknown_order(self, client, order_payload):
        response = client.put("/orders/nope", json=update_payload(order_payload))

        assert response.status_code == 404

    def test_update_is_idempotent(self, client, order_payload):
        payload = update_payload(order_payload)

        first = client.put(f"/orders/{PENDING_ORDER_ID}", json=payload).json()
        second = client.put(f"/orders/{PENDING_ORDER_ID}", json=payload).json()

        assert first == second


def test_lock_delivered_orders(order_payload):
    settings = Settings(_env_file=None, lock_delivered_orders=True)
    app = create_app(settings, Store.seeded())

    with TestClient(app) as client:
        payload = update_payload(order_payload, "preparing")
        locked = client.put(f"/orders/{DELIVERED_ORDER_ID}", json=payload)
        allowed = client.put(f"/orders/{PENDING_ORDER_ID}", json=payload)

    assert locked.status_code == 400
    assert locked.json()["error"] == (
        "Delivery status invalid: a delivered order cannot be changed"
    )
    assert allowed.status_code == 200


class TestDelete:

    def test_delete_pending_order(self, client, store):
        response = client.delete(f"/orders/{PENDING_ORDER_ID}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/orders/{PENDING_ORDER_ID}").status_code == 404
        assert len(store.orders) == 2

    @pytest.mark.parametrize("order_id", [OUT_FOR_DELIVERY_ORDER_ID, DELIVERED_ORDER_ID])
    def test_non_pending_order_is_kept(self, client, store, order_id):
        response = client.delete(f"/orders/{order_id}")

        assert response.status_code == 400
        assert response.json()["error"] == "An order cannot be deleted unless it is pending"
        assert client.get(f"/orders/{order_id}").status_code == 200
        assert len(store.orders) == 3

    def test_delete_unknown_order(self, client):
        assert client.delete("/orders/nope").status_code == 404

    def test_new_order_can_be_deleted_until_it_moves(self, client, order_payload):
        order = client.post("/orders", json=order_payload).json()["data"]
        payload = update_payload(order_payload, "preparing")
        client.put(f"/orders/{order['id']}", json=payload)

        assert client.delete(f"/orders/{order['id']}").status_code == 400
