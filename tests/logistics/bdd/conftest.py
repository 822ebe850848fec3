"""Shared BDD fixtures and step definitions for the Logistics domain."""

import pytest
from logistics.order.order import Order
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a placed order", target_fixture="order")
def placed_order():
    return Order.place(
        shipper_id="shipper-bdd",
        pickup_address="1 Depot Lane",
        dropoff_address="9 Market Street",
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the action fails with "{message}"'))
def action_fails_with(error, message):
    assert error["exc"] is not None
    assert message in str(error["exc"])
