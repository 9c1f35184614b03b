"""Delivery management — assigning couriers and tracking their runs."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from notifications.dispatch import notify_courier
from ordering.delivery.assignment import DeliveryAssignment, DeliveryStatus
from ordering.domain import logger, ordering
from ordering.order.order import Order, OrderStatus
from shared.settings import get_settings


@ordering.command(part_of="DeliveryAssignment")
class AssignCourier:
    order_id = Identifier(required=True)
    courier_name = String(required=True, max_length=255)
    courier_phone = String(required=True, max_length=30)
    estimated_time = String(max_length=50)


@ordering.command(part_of="DeliveryAssignment")
class UpdateDeliveryStatus:
    """Move an assignment forward. Unknown assignment ids are ignored."""

    assignment_id = Identifier(required=True)
    status = String(required=True, max_length=20)


@ordering.command_handler(part_of=DeliveryAssignment)
class DeliveryHandler:
    @handle(AssignCourier)
    def assign_courier(self, command):
        order = current_domain.repository_for(Order).find(command.order_id)
        if order is None:
            raise ValidationError({"order_id": ["Order not found"]})
        if OrderStatus(order.status) != OrderStatus.READY:
            raise ValidationError({"order_id": [f"Only ready orders can be assigned (order is {order.status})"]})

        repo = current_domain.repository_for(DeliveryAssignment)
        if any(a.is_active for a in repo.for_order(order.id)):
            raise ValidationError({"order_id": ["Order already has a courier on the way"]})

        assignment = DeliveryAssignment.assign(
            order_id=order.id,
            courier_name=command.courier_name,
            courier_phone=command.courier_phone,
            estimated_time=command.estimated_time or get_settings().default_courier_eta,
        )
        repo.add(assignment)

        notify_courier(assignment, order)
        logger.info("Courier assigned", order_id=str(order.id), assignment_id=str(assignment.id))
        return str(assignment.id)

    @handle(UpdateDeliveryStatus)
    def update_delivery_status(self, command):
        repo = current_domain.repository_for(DeliveryAssignment)
        assignment = repo.find(command.assignment_id)
        if assignment is None:
            logger.info("Ignoring status update for unknown assignment", assignment_id=str(command.assignment_id))
            return

        if assignment.update_status(command.status):
            repo.add(assignment)

        if DeliveryStatus(assignment.status) == DeliveryStatus.DELIVERED:
            order_repo = current_domain.repository_for(Order)
            order = order_repo.find(assignment.order_id)
            if order is None:
                logger.warning("Delivered assignment points at a missing order", order_id=str(assignment.order_id))
            elif order.update_status(OrderStatus.DELIVERED):
                order_repo.add(order)
                logger.info("Order delivered", order_id=str(order.id), assignment_id=str(assignment.id))
