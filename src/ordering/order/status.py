"""Order status management — the staff dashboard's commands."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class UpdateOrderStatus:
    """Move an order to ``status``. Unknown order ids are ignored."""

    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)


@ordering.command(part_of="Order")
class AdvanceOrder:
    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class OrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.find(command.order_id)
        if order is None:
            logger.info("Ignoring status update for unknown order", order_id=str(command.order_id))
            return

        if order.update_status(command.status):
            repo.add(order)
            logger.info("Order status changed", order_id=str(order.id), status=order.status)

    @handle(AdvanceOrder)
    def advance_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.advance()
        repo.add(order)
        logger.info("Order status changed", order_id=str(order.id), status=order.status)
