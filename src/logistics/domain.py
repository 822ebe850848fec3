"""Logistics bounded context: Order Dispatch and Courier Assignment.

Shippers place orders, couriers are offered assignments for orders that are
ready to ship, and every lifecycle transition is written to an append-only
delivery event log. Uses CQRS: aggregates are stored as current state and
commands run synchronously inside a unit of work.
"""

from protean.domain import Domain

from logistics.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

logistics = Domain(name="logistics")
