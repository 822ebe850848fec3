"""Integration tests for the Logistics API endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from logistics.api import account_router, assignment_router, order_router, register_conflict_handler
from logistics.delivery_event.delivery_event import DeliveryEvent
from logistics.order.order import Order, OrderStatus
from protean import current_domain
from protean.integrations.fastapi import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(account_router)
    app.include_router(order_router)
    app.include_router(assignment_router)
    register_exception_handlers(app)
    register_conflict_handler(app)
    return TestClient(app)


def _place_order(client, **overrides):
    payload = {
        "shipper_id": "s1",
        "pickup_address": "A",
        "dropoff_address": "B",
        "total_weight_kg": 5.0,
    }
    payload.update(overrides)
    response = client.post("/orders", json=payload)
    assert response.status_code == 201
    return response.json()


def _ready_order(client, **overrides):
    order = _place_order(client, **overrides)
    response = client.put(f"/orders/{order['id']}/ready-to-ship")
    assert response.status_code == 200
    return response.json()


def _offer(client, order_id, courier_id="c1"):
    return client.post("/assignments", json={"order_id": order_id, "courier_id": courier_id})


class TestAccountEndpoints:
    def test_create_and_fetch_account(self, client):
        response = client.post("/accounts", json={"name": "Dana Rider", "role": "COURIER"})
        assert response.status_code == 201
        account = response.json()
        assert account["role"] == "COURIER"

        fetched = client.get(f"/accounts/{account['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["name"] == "Dana Rider"

    def test_unknown_role_is_bad_request(self, client):
        response = client.post("/accounts", json={"name": "Dana Rider", "role": "PILOT"})
        assert response.status_code == 400

    def test_missing_account_is_not_found(self, client):
        assert client.get("/accounts/missing").status_code == 404


class TestOrderEndpoints:
    def test_place_order(self, client):
        order = _place_order(client, pickup_address="  A  ", notes="Leave at door")
        assert order["status"] == "PLACED"
        assert order["pickup_address"] == "A"
        assert order["total_weight_kg"] == 5.0
        assert order["notes"] == "Leave at door"

        stored = current_domain.repository_for(Order).get(order["id"])
        assert stored.status == OrderStatus.PLACED.value

    def test_place_order_with_window(self, client):
        order = _place_order(
            client,
            pickup_start_at="2026-07-01T09:00:00+00:00",
            pickup_end_at="2026-07-01T11:00:00+00:00",
        )
        assert order["pickup_start_at"].startswith("2026-07-01T09:00:00")
        assert order["dropoff_start_at"] is None

    def test_place_order_missing_field_is_unprocessable(self, client):
        response = client.post("/orders", json={"shipper_id": "s1", "pickup_address": "A"})
        assert response.status_code == 422

    def test_place_order_blank_address_is_bad_request(self, client):
        response = client.post(
            "/orders",
            json={"shipper_id": "s1", "pickup_address": "   ", "dropoff_address": "B"},
        )
        assert response.status_code == 400

    def test_get_order(self, client):
        order = _place_order(client)
        response = client.get(f"/orders/{order['id']}")
        assert response.status_code == 200
        assert response.json()["id"] == order["id"]

    def test_get_missing_order(self, client):
        assert client.get("/orders/missing").status_code == 404

    def test_list_orders_by_shipper_and_status(self, client):
        _place_order(client, shipper_id="s7")
        _ready_order(client, shipper_id="s7")
        _place_order(client, shipper_id="s8")

        by_shipper = client.get("/orders", params={"shipper_id": "s7"}).json()
        assert len(by_shipper) == 2

        ready = client.get("/orders", params={"status": "READY_TO_SHIP"}).json()
        assert [o["shipper_id"] for o in ready] == ["s7"]

    def test_list_orders_requires_filter(self, client):
        assert client.get("/orders").status_code == 400

    def test_list_orders_unknown_status(self, client):
        assert client.get("/orders", params={"status": "LOST"}).status_code == 422

    def test_ready_to_ship_twice_is_bad_request(self, client):
        order = _ready_order(client)
        response = client.put(f"/orders/{order['id']}/ready-to-ship")
        assert response.status_code == 400

    def test_ready_to_ship_missing_order(self, client):
        assert client.put("/orders/missing/ready-to-ship").status_code == 404

    def test_order_events_with_non_object_payload(self, client):
        current_domain.repository_for(DeliveryEvent).record(
            DeliveryEvent(order_id="o1", event_type="PICKED_UP", payload_json="[1, 2]")
        )
        response = client.get("/orders/o1/events")
        assert response.status_code == 200
        assert response.json()[0]["payload"] is None

    def test_order_events(self, client):
        order = _ready_order(client)
        events = client.get(f"/orders/{order['id']}/events").json()
        assert [e["event_type"] for e in events] == ["ORDER_PLACED", "READY_TO_SHIP"]
        assert events[0]["payload"] == {"shipperId": "s1", "pickupAddress": "A", "dropoffAddress": "B"}

    def test_cancel_order(self, client):
        order = _place_order(client)
        response = client.put(f"/orders/{order['id']}/cancel", json={"reason": "Duplicate"})
        assert response.status_code == 200
        assert response.json()["status"] == "CANCELLED"


class TestAssignmentEndpoints:
    def test_offer_assignment(self, client):
        order = _ready_order(client)
        response = _offer(client, order["id"])
        assert response.status_code == 201
        assert response.json()["status"] == "PENDING"

    def test_offer_on_placed_order_is_bad_request(self, client):
        order = _place_order(client)
        assert _offer(client, order["id"]).status_code == 400

    def test_second_offer_conflicts(self, client):
        order = _ready_order(client)
        _offer(client, order["id"], courier_id="c1")
        response = _offer(client, order["id"], courier_id="c2")
        assert response.status_code == 409
        assert "active assignment" in response.json()["error"]

    def test_offer_missing_order(self, client):
        assert _offer(client, "missing").status_code == 404

    def test_accept_assignment(self, client):
        order = _ready_order(client)
        assignment = _offer(client, order["id"]).json()

        response = client.put(f"/assignments/{assignment['id']}/accept")
        assert response.status_code == 200
        assert response.json()["status"] == "ACCEPTED"
        assert response.json()["responded_at"] is not None
        assert client.get(f"/orders/{order['id']}").json()["status"] == "ASSIGNED"

    def test_accept_twice_is_bad_request(self, client):
        order = _ready_order(client)
        assignment = _offer(client, order["id"]).json()
        client.put(f"/assignments/{assignment['id']}/accept")

        assert client.put(f"/assignments/{assignment['id']}/accept").status_code == 400

    def test_reject_assignment(self, client):
        order = _ready_order(client)
        assignment = _offer(client, order["id"]).json()

        response = client.put(f"/assignments/{assignment['id']}/reject")
        assert response.status_code == 200
        assert response.json()["status"] == "REJECTED"

    def test_list_assignments(self, client):
        order = _ready_order(client)
        _offer(client, order["id"], courier_id="c5")

        by_courier = client.get("/assignments", params={"courier_id": "c5"}).json()
        by_order = client.get("/assignments", params={"order_id": order["id"]}).json()
        assert len(by_courier) == 1
        assert by_courier == by_order
        assert client.get("/assignments").status_code == 400


class TestDeliveryEndpoint:
    def _assigned(self, client, courier_id="c1"):
        order = _ready_order(client)
        assignment = _offer(client, order["id"], courier_id=courier_id).json()
        client.put(f"/assignments/{assignment['id']}/accept")
        return order

    def test_deliver(self, client):
        order = self._assigned(client)
        response = client.put(f"/orders/{order['id']}/deliver", json={"courier_id": "c1"})
        assert response.status_code == 200
        assert response.json()["status"] == "DELIVERED"

        events = client.get(f"/orders/{order['id']}/events").json()
        assert events[-1]["event_type"] == "DELIVERED"
        assert events[-1]["courier_id"] == "c1"

    def test_deliver_by_other_courier_conflicts(self, client):
        order = self._assigned(client)
        response = client.put(f"/orders/{order['id']}/deliver", json={"courier_id": "c2"})
        assert response.status_code == 409

    def test_cancel_after_delivery_is_bad_request(self, client):
        order = self._assigned(client)
        client.put(f"/orders/{order['id']}/deliver", json={"courier_id": "c1"})
        response = client.put(f"/orders/{order['id']}/cancel", json={})
        assert response.status_code == 400
