"""Assignment repository: per-order and per-courier lookups."""

from protean.exceptions import ObjectNotFoundError

from logistics.assignment.assignment import ACTIVE_STATUSES, Assignment
from logistics.domain import logistics


@logistics.repository(part_of=Assignment)
class AssignmentRepository:
    def find_by_id(self, assignment_id: str) -> Assignment | None:
        try:
            return self.get(assignment_id)
        except ObjectNotFoundError:
            return None

    def find_by_order_id(self, order_id: str) -> list[Assignment]:
        return self._dao.query.filter(order_id=str(order_id)).order_by("offered_at").all().items

    def find_by_courier_id(self, courier_id: str) -> list[Assignment]:
        return self._dao.query.filter(courier_id=str(courier_id)).order_by("offered_at").all().items

    def find_active_by_order_id(self, order_id: str) -> Assignment | None:
        """The PENDING or ACCEPTED assignment for an order, if any."""
        results = self._dao.query.filter(order_id=str(order_id), status__in=ACTIVE_STATUSES).all()
        return results.first
