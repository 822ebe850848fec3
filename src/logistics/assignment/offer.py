"""Assignment offer: command and handler.

Enforces one active assignment per order at handler level (cross-aggregate
check requires a repository query). Offering does not record a delivery
event; the order only counts as assigned once a courier accepts.
"""

import structlog
from protean import handle
from protean.exceptions import InvalidOperationError, ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from logistics.assignment.assignment import Assignment
from logistics.domain import logistics
from logistics.order.order import Order, OrderStatus

logger = structlog.get_logger(__name__)


@logistics.command(part_of="Assignment")
class OfferAssignment:
    """Offer a ready-to-ship order to a courier."""

    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)


@logistics.command_handler(part_of=Assignment)
class OfferAssignmentHandler:
    @handle(OfferAssignment)
    def offer_assignment(self, command):
        order = current_domain.repository_for(Order).get(command.order_id)
        if not order.can_be_assigned():
            raise ValidationError(
                {"status": [f"Order cannot be assigned; required status {OrderStatus.READY_TO_SHIP.value}"]}
            )

        repo = current_domain.repository_for(Assignment)
        existing = repo.find_active_by_order_id(order.id)
        if existing is not None:
            logger.warning(
                "Order already has an active assignment",
                order_id=str(order.id),
                assignment_id=str(existing.id),
            )
            raise InvalidOperationError("Order already has an active assignment")

        assignment = Assignment.offer(order_id=str(order.id), courier_id=command.courier_id)
        repo.add(assignment)
        logger.info(
            "Assignment offered",
            assignment_id=str(assignment.id),
            order_id=str(order.id),
            courier_id=str(assignment.courier_id),
        )
        return assignment
