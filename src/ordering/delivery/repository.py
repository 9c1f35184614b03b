"""Repository for the DeliveryAssignment aggregate."""

from protean.exceptions import ObjectNotFoundError

from ordering.delivery.assignment import ACTIVE_STATUSES, DeliveryAssignment
from ordering.domain import ordering


@ordering.repository(part_of=DeliveryAssignment)
class DeliveryAssignmentRepository:
    def find(self, assignment_id) -> DeliveryAssignment | None:
        try:
            return self.get(assignment_id)
        except ObjectNotFoundError:
            return None

    def for_order(self, order_id) -> list[DeliveryAssignment]:
        query = self._dao.query.filter(order_id=str(order_id))
        return query.order_by("assigned_at").limit(None).all().items

    def active(self) -> list[DeliveryAssignment]:
        """Assignments that have not reached the customer yet, oldest first."""
        query = self._dao.query.filter(status__in=[s.value for s in ACTIVE_STATUSES])
        return query.order_by("assigned_at").limit(None).all().items
