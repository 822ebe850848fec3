"""Order delivery: command and handler.

The courier holding the order's accepted assignment confirms delivery. The
order moves to DELIVERED and the assignment to COMPLETED in one unit of work.
"""

import structlog
from protean import handle
from protean.exceptions import InvalidOperationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from logistics.assignment.assignment import Assignment, AssignmentStatus
from logistics.delivery_event.delivery_event import DeliveryEvent, EventType
from logistics.domain import logistics
from logistics.order.order import Order

logger = structlog.get_logger(__name__)


@logistics.command(part_of="Order")
class DeliverOrder:
    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)


@logistics.command_handler(part_of=Order)
class DeliverOrderHandler:
    @handle(DeliverOrder)
    def deliver_order(self, command):
        order_repo = current_domain.repository_for(Order)
        assignment_repo = current_domain.repository_for(Assignment)

        order = order_repo.get(command.order_id)
        assignment = assignment_repo.find_active_by_order_id(order.id)
        if (
            assignment is None
            or AssignmentStatus(assignment.status) != AssignmentStatus.ACCEPTED
            or str(assignment.courier_id) != str(command.courier_id)
        ):
            logger.warning(
                "Delivery rejected, courier holds no accepted assignment",
                order_id=str(order.id),
                courier_id=str(command.courier_id),
            )
            raise InvalidOperationError("Only the courier with the accepted assignment can deliver this order")

        order.deliver()
        assignment.complete()
        order_repo.add(order)
        assignment_repo.add(assignment)

        current_domain.repository_for(DeliveryEvent).record(
            DeliveryEvent.record(
                order_id=str(order.id),
                courier_id=str(assignment.courier_id),
                event_type=EventType.DELIVERED,
                payload={
                    "assignmentId": str(assignment.id),
                    "courierId": str(assignment.courier_id),
                },
            )
        )
        logger.info(
            "Order delivered",
            order_id=str(order.id),
            assignment_id=str(assignment.id),
            courier_id=str(assignment.courier_id),
        )
        return order
