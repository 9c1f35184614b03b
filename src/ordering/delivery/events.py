"""Domain events for the DeliveryAssignment aggregate."""

from protean.fields import DateTime, Identifier, String

from ordering.domain import ordering


@ordering.event(part_of="DeliveryAssignment")
class CourierAssigned:
    """A courier was put in charge of a ready order."""

    __version__ = 1

    assignment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    courier_name = String(required=True, max_length=255)
    courier_phone = String(required=True, max_length=30)
    estimated_time = String(max_length=50)
    assigned_at = DateTime(required=True)


@ordering.event(part_of="DeliveryAssignment")
class DeliveryStatusChanged:
    __version__ = 1

    assignment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    previous_status = String(required=True, max_length=20)
    new_status = String(required=True, max_length=20)
    changed_at = DateTime(required=True)
