"""Order repository with shipper and status lookups."""

from protean.exceptions import ObjectNotFoundError

from logistics.domain import logistics
from logistics.order.order import Order, OrderStatus


@logistics.repository(part_of=Order)
class OrderRepository:
    def find_by_id(self, order_id: str) -> Order | None:
        try:
            return self.get(order_id)
        except ObjectNotFoundError:
            return None

    def find_by_shipper_id(self, shipper_id: str) -> list[Order]:
        return self._dao.query.filter(shipper_id=str(shipper_id)).order_by("created_at").all().items

    def find_by_status(self, status: OrderStatus | str) -> list[Order]:
        status = OrderStatus(status)
        return self._dao.query.filter(status=status.value).order_by("created_at").all().items
