"""Delivery load test scenarios.

Stateful SequentialTaskSet journeys over the dispatch lifecycle. Steps
execute in order and each depends on the previous step succeeding.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import cancellation_reason, courier_account, order_data, shipper_account
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ContentionState, DispatchState


class _AccountsMixin:
    def _create_account(self, payload: dict) -> str | None:
        with self.client.post("/accounts", json=payload, catch_response=True, name="POST /accounts") as resp:
            if resp.status_code == 201:
                return resp.json()["id"]
            resp.failure(f"Account creation failed: {resp.status_code}: {extract_error_detail(resp)}")
            self.interrupt()

    def _place_ready_order(self, shipper_id: str) -> str | None:
        with self.client.post("/orders", json=order_data(shipper_id), catch_response=True, name="POST /orders") as resp:
            if resp.status_code != 201:
                resp.failure(f"Place order failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()
            order_id = resp.json()["id"]

        with self.client.put(
            f"/orders/{order_id}/ready-to-ship",
            catch_response=True,
            name="PUT /orders/{id}/ready-to-ship",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Ready-to-ship failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()
        return order_id


class DeliveryJourney(_AccountsMixin, SequentialTaskSet):
    """Accounts -> Place -> Ready -> Offer -> Accept -> Deliver -> Read events.

    Records 4 delivery events: ORDER_PLACED, READY_TO_SHIP, ASSIGNED, DELIVERED.
    """

    def on_start(self):
        self.state = DispatchState()

    @task
    def create_accounts(self):
        self.state.shipper_id = self._create_account(shipper_account())
        self.state.courier_id = self._create_account(courier_account())

    @task
    def place_ready_order(self):
        self.state.order_id = self._place_ready_order(self.state.shipper_id)
        self.state.current_status = "READY_TO_SHIP"

    @task
    def offer(self):
        with self.client.post(
            "/assignments",
            json={"order_id": self.state.order_id, "courier_id": self.state.courier_id},
            catch_response=True,
            name="POST /assignments",
        ) as resp:
            if resp.status_code == 201:
                self.state.assignment_id = resp.json()["id"]
            else:
                resp.failure(f"Offer failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def accept(self):
        with self.client.put(
            f"/assignments/{self.state.assignment_id}/accept",
            catch_response=True,
            name="PUT /assignments/{id}/accept",
        ) as resp:
            if resp.status_code == 200:
                self.state.current_status = "ASSIGNED"
            else:
                resp.failure(f"Accept failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def deliver(self):
        with self.client.put(
            f"/orders/{self.state.order_id}/deliver",
            json={"courier_id": self.state.courier_id},
            catch_response=True,
            name="PUT /orders/{id}/deliver",
        ) as resp:
            if resp.status_code == 200:
                self.state.current_status = "DELIVERED"
            else:
                resp.failure(f"Deliver failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def read_events(self):
        with self.client.get(
            f"/orders/{self.state.order_id}/events",
            catch_response=True,
            name="GET /orders/{id}/events",
        ) as resp:
            if resp.status_code == 200 and len(resp.json()) != 4:
                resp.failure(f"Expected 4 delivery events, got {len(resp.json())}")

    @task
    def done(self):
        self.interrupt()


class CancellationJourney(_AccountsMixin, SequentialTaskSet):
    """Place -> Ready -> Offer -> Cancel. The pending assignment is cancelled too."""

    def on_start(self):
        self.state = DispatchState()

    @task
    def setup(self):
        self.state.shipper_id = self._create_account(shipper_account())
        self.state.order_id = self._place_ready_order(self.state.shipper_id)

    @task
    def offer(self):
        with self.client.post(
            "/assignments",
            json={"order_id": self.state.order_id, "courier_id": "courier-loadtest"},
            catch_response=True,
            name="POST /assignments",
        ) as resp:
            if resp.status_code == 201:
                self.state.assignment_id = resp.json()["id"]
            else:
                resp.failure(f"Offer failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def cancel(self):
        with self.client.put(
            f"/orders/{self.state.order_id}/cancel",
            json={"reason": cancellation_reason()},
            catch_response=True,
            name="PUT /orders/{id}/cancel",
        ) as resp:
            if resp.status_code == 200:
                self.state.current_status = "CANCELLED"
            else:
                resp.failure(f"Cancel failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class OfferContentionJourney(_AccountsMixin, SequentialTaskSet):
    """Several couriers compete for one order.

    Only the first offer may succeed; the rest must be refused with 409.
    Accepting the winning assignment twice must be refused with 400.
    """

    def on_start(self):
        self.state = ContentionState()

    @task
    def setup(self):
        shipper_id = self._create_account(shipper_account())
        self.state.order_id = self._place_ready_order(shipper_id)
        self.state.courier_ids = [self._create_account(courier_account()) for _ in range(3)]

    @task
    def competing_offers(self):
        for courier_id in self.state.courier_ids:
            with self.client.post(
                "/assignments",
                json={"order_id": self.state.order_id, "courier_id": courier_id},
                catch_response=True,
                name="[CONTENTION] POST /assignments",
            ) as resp:
                if resp.status_code == 201 and self.state.assignment_id is None:
                    self.state.assignment_id = resp.json()["id"]
                    resp.success()
                elif resp.status_code == 409 and self.state.assignment_id is not None:
                    resp.success()
                else:
                    resp.failure(f"Unexpected offer outcome: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def double_accept(self):
        for attempt in range(2):
            with self.client.put(
                f"/assignments/{self.state.assignment_id}/accept",
                catch_response=True,
                name="[CONTENTION] PUT /assignments/{id}/accept",
            ) as resp:
                expected = 200 if attempt == 0 else 400
                if resp.status_code == expected:
                    resp.success()
                else:
                    resp.failure(f"Accept #{attempt + 1}: expected {expected}, got {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class DeliveryUser(HttpUser):
    """Locust user simulating shippers and couriers.

    Weighted task distribution:
    - 60% full delivery journey
    - 25% cancellation
    - 15% offer contention
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        DeliveryJourney: 12,
        CancellationJourney: 5,
        OfferContentionJourney: 3,
    }
