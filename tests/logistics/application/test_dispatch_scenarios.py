"""End-to-end dispatch scenarios through the command handlers."""

import pytest
from logistics.assignment.acceptance import AcceptAssignment
from logistics.assignment.assignment import Assignment, AssignmentStatus
from logistics.assignment.offer import OfferAssignment
from logistics.delivery_event.delivery_event import DeliveryEvent, EventType
from logistics.order.order import Order, OrderStatus
from logistics.order.placement import PlaceOrder
from logistics.order.readiness import MarkReadyToShip
from protean import current_domain
from protean.exceptions import InvalidOperationError, ValidationError


def _process(command):
    return current_domain.process(command, asynchronous=False)


def _place():
    return _process(PlaceOrder(shipper_id="s1", pickup_address="A", dropoff_address="B", total_weight_kg=5.0))


class TestPlacingAnOrder:
    def test_placed_order_and_event_are_persisted(self):
        order = _place()

        assert order.status == OrderStatus.PLACED.value
        assert current_domain.repository_for(Order).find_by_id(order.id) is not None
        events = current_domain.repository_for(DeliveryEvent).find_by_order_id(order.id)
        assert [e.event_type for e in events] == [EventType.ORDER_PLACED.value]
        assert str(events[0].order_id) == str(order.id)


class TestOfferingBeforeReady:
    def test_offer_fails_naming_required_status(self):
        order = _place()
        with pytest.raises(ValidationError) as exc:
            _process(OfferAssignment(order_id=order.id, courier_id="c1"))
        assert "required status READY_TO_SHIP" in str(exc.value)


class TestOfferingTwice:
    def test_second_offer_conflicts_and_persists_nothing(self):
        order = _place()
        _process(MarkReadyToShip(order_id=order.id))
        _process(OfferAssignment(order_id=order.id, courier_id="c1"))

        with pytest.raises(InvalidOperationError):
            _process(OfferAssignment(order_id=order.id, courier_id="c2"))

        assert len(current_domain.repository_for(Assignment).find_by_order_id(order.id)) == 1
        assert current_domain.repository_for(Assignment).find_by_courier_id("c2") == []


class TestAcceptingAnOffer:
    def test_accept_assigns_order_and_records_one_event(self):
        order = _place()
        _process(MarkReadyToShip(order_id=order.id))
        assignment = _process(OfferAssignment(order_id=order.id, courier_id="c1"))

        accepted = _process(AcceptAssignment(assignment_id=assignment.id))

        assert accepted.status == AssignmentStatus.ACCEPTED.value
        assert accepted.responded_at is not None
        assert current_domain.repository_for(Order).get(order.id).status == OrderStatus.ASSIGNED.value
        assigned = current_domain.repository_for(DeliveryEvent).find_by_type(EventType.ASSIGNED)
        assert len(assigned) == 1


class TestAcceptingTwice:
    def test_second_accept_fails_without_writes(self):
        order = _place()
        _process(MarkReadyToShip(order_id=order.id))
        assignment = _process(OfferAssignment(order_id=order.id, courier_id="c1"))
        _process(AcceptAssignment(assignment_id=assignment.id))
        responded_at = current_domain.repository_for(Assignment).get(assignment.id).responded_at

        with pytest.raises(ValidationError) as exc:
            _process(AcceptAssignment(assignment_id=assignment.id))
        assert "PENDING" in str(exc.value)

        stored = current_domain.repository_for(Assignment).get(assignment.id)
        assert stored.responded_at == responded_at
        assert len(current_domain.repository_for(DeliveryEvent).find_by_order_id(order.id)) == 3
