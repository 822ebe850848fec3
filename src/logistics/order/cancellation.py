"""Order cancellation: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from logistics.assignment.assignment import Assignment
from logistics.delivery_event.delivery_event import DeliveryEvent, EventType
from logistics.domain import logistics
from logistics.order.order import Order

logger = structlog.get_logger(__name__)


@logistics.command(part_of="Order")
class CancelOrder:
    """Cancel an order that has not been delivered yet.

    Any pending or accepted assignment for the order is cancelled with it.
    """

    order_id = Identifier(required=True)
    reason = String(max_length=500)


@logistics.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        order_repo = current_domain.repository_for(Order)
        assignment_repo = current_domain.repository_for(Assignment)

        order = order_repo.get(command.order_id)
        order.cancel()
        assignment = assignment_repo.find_active_by_order_id(order.id)
        if assignment is not None:
            assignment.cancel()

        order_repo.add(order)
        courier_id = None
        if assignment is not None:
            assignment_repo.add(assignment)
            courier_id = str(assignment.courier_id)

        current_domain.repository_for(DeliveryEvent).record(
            DeliveryEvent.record(
                order_id=str(order.id),
                courier_id=courier_id,
                event_type=EventType.CANCELLED,
                payload={"reason": command.reason},
            )
        )
        logger.info("Order cancelled", order_id=str(order.id), courier_id=courier_id)
        return order
