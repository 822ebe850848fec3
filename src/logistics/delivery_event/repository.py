"""DeliveryEvent repository: lookups over the event log."""

from protean.exceptions import ObjectNotFoundError

from logistics.delivery_event.delivery_event import DeliveryEvent, EventType
from logistics.domain import logistics


@logistics.repository(part_of=DeliveryEvent)
class DeliveryEventRepository:
    def record(self, event: DeliveryEvent) -> DeliveryEvent:
        """Append an event to the log. Events are never updated."""
        self.add(event)
        return event

    def find_by_id(self, event_id: str) -> DeliveryEvent | None:
        try:
            return self.get(event_id)
        except ObjectNotFoundError:
            return None

    def find_by_order_id(self, order_id: str) -> list[DeliveryEvent]:
        """Events for one order, oldest first."""
        return self._dao.query.filter(order_id=str(order_id)).order_by("occurred_at").all().items

    def find_by_type(self, event_type: EventType | str) -> list[DeliveryEvent]:
        """Events of one type, newest first."""
        event_type = EventType(event_type)
        return self._dao.query.filter(event_type=event_type.value).order_by("-occurred_at").all().items
