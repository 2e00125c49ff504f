import pytest

from tests.conftest import SEED_DISH_ID


def test_list_dishes(client):
    response = client.get("/dishes")

    assert response.status_code == 200
    assert len(response.json()["data"]) == 3


def test_create_read_update_scenario(client, dish_payload):
    response = client.post("/dishes", json=dish_payload)
    assert response.status_code == 201
    created = response.json()["data"]
    assert created == {"id": created["id"], **dish_payload["data"]}

    response = client.get(f"/dishes/{created['id']}")
    assert response.status_code == 200
    assert response.json()["data"] == created

    dish_payload["data"]["price"] = -5
    response = client.put(f"/dishes/{created['id']}", json=dish_payload)
    assert response.status_code == 400

    assert client.get(f"/dishes/{created['id']}").json()["data"] == created


def test_created_ids_are_unique(client, dish_payload):
    ids = {client.post("/dishes", json=dish_payload).json()["data"]["id"] for _ in range(10)}

    assert len(ids) == 10
    assert SEED_DISH_ID not in ids


@pytest.mark.parametrize("field", ["name", "description", "price", "image_url"])
def test_create_without_field_is_rejected(client, store, dish_payload, field):
    del dish_payload["data"][field]

    response = client.post("/dishes", json=dish_payload)

    assert response.status_code == 400
    assert response.json() == {"error": f"Must include a {field}"}
    assert len(store.dishes) == 3


def test_create_with_empty_name_is_rejected(client, dish_payload):
    dish_payload["data"]["name"] = ""

    assert client.post("/dishes", json=dish_payload).status_code == 400


@pytest.mark.parametrize("price,message", [
    (-1, "Price can not be negative... price."),
    ("12", 'price is not of type "number".'),
    (True, 'price is not of type "number".'),
])
def test_create_with_bad_price_is_rejected(client, store, dish_payload, price, message):
    dish_payload["data"]["price"] = price

    response = client.post("/dishes", json=dish_payload)

    assert response.status_code == 400
    assert response.json()["error"] == message
    assert len(store.dishes) == 3


def test_free_dish_is_accepted(client, dish_payload):
    dish_payload["data"]["price"] = 0

    response = client.post("/dishes", json=dish_payload)

    assert response.status_code == 201
    assert response.json()["data"]["price"] == 0


def test_create_without_data_envelope(client, dish_payload):
    response = client.post("/dishes", json=dish_payload["data"])

    assert response.status_code == 400
    assert response.json()["error"] == "Must include a name"


def test_read_unknown_dish(client):
    response = client.get("/dishes/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Dish does not exist: nope."}


def test_update_replaces_every_field(client, dish_payload):
    dish_payload["data"].update(name="Stir fry v2", price=16)

    response = client.put(f"/dishes/{SEED_DISH_ID}", json=dish_payload)

    assert response.status_code == 200
    assert response.json()["data"] == {"id": SEED_DISH_ID, **dish_payload["data"]}


def test_update_with_matching_body_id(client, dish_payload):
    dish_payload["data"]["id"] = SEED_DISH_ID

    response = client.put(f"/dishes/{SEED_DISH_ID}", json=dish_payload)

    assert response.status_code == 200
    assert response.json()["data"]["id"] == SEED_DISH_ID


def test_update_with_mismatched_body_id(client, dish_payload):
    before = client.get(f"/dishes/{SEED_DISH_ID}").json()["data"]
    dish_payload["data"]["id"] = "other"

    response = client.put(f"/dishes/{SEED_DISH_ID}", json=dish_payload)

    assert response.status_code == 400
    assert response.json()["error"] == (
        f"Dish id does not match route id. Dish: other, Route: {SEED_DISH_ID}"
    )
    assert client.get(f"/dishes/{SEED_DISH_ID}").json()["data"] == before


def test_update_unknown_dish_checks_existence_first(client):
    response = client.put("/dishes/nope", json={"data": {}})

    assert response.status_code == 404


def test_update_is_idempotent(client, dish_payload):
    first = client.put(f"/dishes/{SEED_DISH_ID}", json=dish_payload).json()
    second = client.put(f"/dishes/{SEED_DISH_ID}", json=dish_payload).json()

    assert first == second


def test_dishes_cannot_be_deleted(client):
    response = client.delete(f"/dishes/{SEED_DISH_ID}")

    assert response.status_code == 405
    assert client.get(f"/dishes/{SEED_DISH_ID}").status_code == 200
