"""Assignment aggregate (CQRS): an offer to a courier to deliver one order.

State Machine:
    PENDING → ACCEPTED → COMPLETED
    PENDING → REJECTED
    {PENDING, ACCEPTED} → CANCELLED
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String

from logistics.domain import logistics


class AssignmentStatus(Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @property
    def is_active(self) -> bool:
        return self in (AssignmentStatus.PENDING, AssignmentStatus.ACCEPTED)

    @property
    def is_pending(self) -> bool:
        return self is AssignmentStatus.PENDING

    @property
    def is_accepted(self) -> bool:
        return self is AssignmentStatus.ACCEPTED

    @property
    def is_rejected(self) -> bool:
        return self is AssignmentStatus.REJECTED

    @property
    def is_completed(self) -> bool:
        return self is AssignmentStatus.COMPLETED


ACTIVE_STATUSES = [s.value for s in AssignmentStatus if s.is_active]


@logistics.aggregate
class Assignment:
    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    status = String(
        choices=AssignmentStatus,
        default=AssignmentStatus.PENDING.value,
    )
    offered_at = DateTime()
    responded_at = DateTime()

    @classmethod
    def offer(cls, order_id: str, courier_id: str):
        """Offer an order to a courier. The assignment starts PENDING."""
        return cls(
            order_id=order_id,
            courier_id=courier_id,
            status=AssignmentStatus.PENDING.value,
            offered_at=datetime.now(UTC),
        )

    def is_active(self) -> bool:
        return AssignmentStatus(self.status).is_active

    def accept(self) -> None:
        if not AssignmentStatus(self.status).is_pending:
            raise ValidationError({"status": ["Only PENDING assignments can be accepted"]})
        self.status = AssignmentStatus.ACCEPTED.value
        self.responded_at = datetime.now(UTC)

    def reject(self) -> None:
        if not AssignmentStatus(self.status).is_pending:
            raise ValidationError({"status": ["Only PENDING assignments can be rejected"]})
        self.status = AssignmentStatus.REJECTED.value
        self.responded_at = datetime.now(UTC)

    def complete(self) -> None:
        if not AssignmentStatus(self.status).is_accepted:
            raise ValidationError({"status": ["Only ACCEPTED assignments can be completed"]})
        self.status = AssignmentStatus.COMPLETED.value

    def cancel(self) -> None:
        if AssignmentStatus(self.status).is_completed:
            raise ValidationError({"status": ["Completed assignments cannot be cancelled"]})
        self.status = AssignmentStatus.CANCELLED.value
