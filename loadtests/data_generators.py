"""Faker-based data generators for Locust load test scenarios.

Payloads pass the domain's validation rules (non-blank addresses, ordered
time windows, non-negative weights) and use the field names of the API's
Pydantic request schemas.
"""

import random
from datetime import UTC, datetime, timedelta

from faker import Faker

fake = Faker()


def shipper_account() -> dict:
    return {"name": fake.company()[:255], "role": "SHIPPER"}


def courier_account() -> dict:
    return {"name": fake.name()[:255], "role": "COURIER"}


def street_address() -> str:
    return fake.address().replace("\n", ", ")[:500]


def time_window(earliest: datetime, hours: int = 2) -> tuple[str, str]:
    """ISO start/end pair beginning within a day of ``earliest``."""
    start = earliest + timedelta(minutes=random.randint(0, 24 * 60))
    return start.isoformat(), (start + timedelta(hours=hours)).isoformat()


def order_data(shipper_id: str) -> dict:
    """Generate a PlaceOrderRequest payload."""
    now = datetime.now(UTC)
    pickup_start, pickup_end = time_window(now)
    dropoff_start, dropoff_end = time_window(now + timedelta(days=1), hours=4)
    payload = {
        "shipper_id": shipper_id,
        "pickup_address": street_address(),
        "dropoff_address": street_address(),
        "pickup_start_at": pickup_start,
        "pickup_end_at": pickup_end,
        "dropoff_start_at": dropoff_start,
        "dropoff_end_at": dropoff_end,
        "total_weight_kg": round(random.uniform(0.1, 40.0), 2),
    }
    if random.random() < 0.3:
        payload["notes"] = fake.sentence(nb_words=8)
    return payload


def cancellation_reason() -> str:
    return random.choice(["Customer request", "Duplicate order", "Address unreachable", "Stock unavailable"])
