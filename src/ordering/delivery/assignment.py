"""DeliveryAssignment aggregate — a courier run for one ready order.

State Machine:
    ASSIGNED → PICKING_UP → ON_THE_WAY → DELIVERED

Any forward move is accepted, so an assignment may go straight from
ASSIGNED to DELIVERED. Backward moves are rejected.

The assignment only references its order. Reaching DELIVERED is what drives
the referenced order to its own delivered status (see ``management``).
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String

from ordering.delivery.events import CourierAssigned, DeliveryStatusChanged
from ordering.domain import ordering
from ordering.transitions import resolve_transition


class DeliveryStatus(Enum):
    ASSIGNED = "assigned"
    PICKING_UP = "picking_up"
    ON_THE_WAY = "on_the_way"
    DELIVERED = "delivered"


_VALID_TRANSITIONS = {
    DeliveryStatus.ASSIGNED: {DeliveryStatus.PICKING_UP, DeliveryStatus.ON_THE_WAY, DeliveryStatus.DELIVERED},
    DeliveryStatus.PICKING_UP: {DeliveryStatus.ON_THE_WAY, DeliveryStatus.DELIVERED},
    DeliveryStatus.ON_THE_WAY: {DeliveryStatus.DELIVERED},
    DeliveryStatus.DELIVERED: set(),  # Terminal
}

ACTIVE_STATUSES = (DeliveryStatus.ASSIGNED, DeliveryStatus.PICKING_UP, DeliveryStatus.ON_THE_WAY)


def transition(current, requested) -> DeliveryStatus:
    """Resolve a requested delivery status against the current one."""
    return resolve_transition(DeliveryStatus, _VALID_TRANSITIONS, current, requested)


@ordering.aggregate
class DeliveryAssignment:
    order_id = Identifier(required=True)
    courier_name = String(required=True, max_length=255)
    courier_phone = String(required=True, max_length=30)
    estimated_time = String(max_length=50)
    status = String(choices=DeliveryStatus, default=DeliveryStatus.ASSIGNED.value)
    assigned_at = DateTime()
    updated_at = DateTime()

    @property
    def is_active(self) -> bool:
        return self.status != DeliveryStatus.DELIVERED.value

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def assign(cls, order_id, courier_name, courier_phone, estimated_time):
        errors = {}
        if not courier_name or not courier_name.strip():
            errors["courier_name"] = ["Courier name is required"]
        if not courier_phone or not courier_phone.strip():
            errors["courier_phone"] = ["Courier phone is required"]
        if errors:
            raise ValidationError(errors)

        now = datetime.now(UTC)
        assignment = cls(
            order_id=order_id,
            courier_name=courier_name.strip(),
            courier_phone=courier_phone.strip(),
            estimated_time=estimated_time,
            status=DeliveryStatus.ASSIGNED.value,
            assigned_at=now,
            updated_at=now,
        )
        assignment.raise_(
            CourierAssigned(
                assignment_id=str(assignment.id),
                order_id=str(order_id),
                courier_name=assignment.courier_name,
                courier_phone=assignment.courier_phone,
                estimated_time=estimated_time,
                assigned_at=now,
            )
        )
        return assignment

    # -------------------------------------------------------------------
    # Status transitions
    # -------------------------------------------------------------------
    def update_status(self, status) -> bool:
        """Move to ``status``. Returns False when the assignment is already there."""
        current = DeliveryStatus(self.status)
        target = transition(current, status)
        if target == current:
            return False

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            DeliveryStatusChanged(
                assignment_id=str(self.id),
                order_id=str(self.order_id),
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )
        return True
