"""Tests for the DeliveryAssignment aggregate."""

import pytest
from ordering.delivery.assignment import DeliveryAssignment, DeliveryStatus
from ordering.delivery.events import CourierAssigned, DeliveryStatusChanged
from protean.exceptions import ValidationError


def _assign(**overrides):
    defaults = {
        "order_id": "ord-001",
        "courier_name": "João",
        "courier_phone": "(21) 98888-7777",
        "estimated_time": "30 minutos",
    }
    defaults.update(overrides)
    return DeliveryAssignment.assign(**defaults)


class TestAssignment:
    def test_assign_starts_assigned(self):
        assignment = _assign()
        assert assignment.status == DeliveryStatus.ASSIGNED.value
        assert assignment.assigned_at is not None
        assert assignment.is_active is True

    def test_assign_raises_event(self):
        assignment = _assign()
        event = assignment._events[-1]
        assert isinstance(event, CourierAssigned)
        assert event.courier_name == "João"
        assert str(event.order_id) == "ord-001"

    @pytest.mark.parametrize("field", ["courier_name", "courier_phone"])
    def test_blank_courier_contact_is_rejected(self, field):
        with pytest.raises(ValidationError) as exc:
            _assign(**{field: "   "})
        assert field in exc.value.messages


class TestDeliveryProgress:
    def test_walk_to_delivered(self):
        assignment = _assign()
        for status in ("picking_up", "on_the_way", "delivered"):
            assert assignment.update_status(status) is True
        assert assignment.status == DeliveryStatus.DELIVERED.value
        assert assignment.is_active is False
        assert isinstance(assignment._events[-1], DeliveryStatusChanged)

    def test_repeated_status_is_a_no_op(self):
        assignment = _assign()
        assert assignment.update_status("assigned") is False

    def test_can_jump_straight_to_delivered(self):
        assignment = _assign()
        assert assignment.update_status("delivered") is True
        assert assignment.status == DeliveryStatus.DELIVERED.value
        assert assignment._events[-1].previous_status == "assigned"

    def test_can_skip_intermediate_step(self):
        assignment = _assign()
        assignment.update_status("on_the_way")
        assert assignment.status == DeliveryStatus.ON_THE_WAY.value

    @pytest.mark.parametrize(
        "steps, backwards",
        [
            (("picking_up",), "assigned"),
            (("on_the_way",), "picking_up"),
            (("delivered",), "on_the_way"),
        ],
    )
    def test_moving_backwards_is_rejected(self, steps, backwards):
        assignment = _assign()
        for status in steps:
            assignment.update_status(status)
        with pytest.raises(ValidationError):
            assignment.update_status(backwards)

    def test_unknown_status_is_rejected(self):
        with pytest.raises(ValidationError):
            _assign().update_status("lost")
