"""Assignment rejection: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from logistics.assignment.assignment import Assignment
from logistics.domain import logistics

logger = structlog.get_logger(__name__)


@logistics.command(part_of="Assignment")
class RejectAssignment:
    """Decline a pending offer. The order stays ready to ship for other couriers."""

    assignment_id = Identifier(required=True)


@logistics.command_handler(part_of=Assignment)
class RejectAssignmentHandler:
    @handle(RejectAssignment)
    def reject_assignment(self, command):
        repo = current_domain.repository_for(Assignment)
        assignment = repo.get(command.assignment_id)
        assignment.reject()
        repo.add(assignment)
        logger.info(
            "Assignment rejected",
            assignment_id=str(assignment.id),
            order_id=str(assignment.order_id),
        )
        return assignment
