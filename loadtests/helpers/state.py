"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own IDs so follow-up requests can
reference what earlier steps created. Nothing is shared across users.
"""

from dataclasses import dataclass, field


@dataclass
class DispatchState:
    """One order's trip from placement to delivery."""

    shipper_id: str | None = None
    courier_id: str | None = None
    order_id: str | None = None
    assignment_id: str | None = None
    current_status: str = "PLACED"


@dataclass
class ContentionState:
    """Several couriers racing for the same order."""

    order_id: str | None = None
    courier_ids: list[str] = field(default_factory=list)
    assignment_id: str | None = None
