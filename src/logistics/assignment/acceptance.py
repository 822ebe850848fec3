"""Assignment acceptance: command and handler.

Accepting an assignment moves the courier's assignment to ACCEPTED and the
order to ASSIGNED. Both writes and the ASSIGNED delivery event share the
command's unit of work, so a failure on the order leaves the assignment
untouched.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from logistics.assignment.assignment import Assignment
from logistics.delivery_event.delivery_event import DeliveryEvent, EventType
from logistics.domain import logistics
from logistics.order.order import Order

logger = structlog.get_logger(__name__)


@logistics.command(part_of="Assignment")
class AcceptAssignment:
    assignment_id = Identifier(required=True)


@logistics.command_handler(part_of=Assignment)
class AcceptAssignmentHandler:
    @handle(AcceptAssignment)
    def accept_assignment(self, command):
        assignment_repo = current_domain.repository_for(Assignment)
        order_repo = current_domain.repository_for(Order)

        assignment = assignment_repo.get(command.assignment_id)
        assignment.accept()
        order = order_repo.get(assignment.order_id)
        order.assign()

        assignment_repo.add(assignment)
        order_repo.add(order)

        current_domain.repository_for(DeliveryEvent).record(
            DeliveryEvent.record(
                order_id=str(order.id),
                courier_id=str(assignment.courier_id),
                event_type=EventType.ASSIGNED,
                payload={
                    "assignmentId": str(assignment.id),
                    "courierId": str(assignment.courier_id),
                },
            )
        )
        logger.info(
            "Assignment accepted",
            assignment_id=str(assignment.id),
            order_id=str(order.id),
            courier_id=str(assignment.courier_id),
        )
        return assignment
