"""Repository for the Customer aggregate."""

from protean.exceptions import ObjectNotFoundError

from identity.customer.customer import Customer
from identity.domain import identity


@identity.repository(part_of=Customer)
class CustomerRepository:
    def find(self, customer_id) -> Customer | None:
        try:
            return self.get(customer_id)
        except ObjectNotFoundError:
            return None

    def find_by_phone(self, phone) -> Customer | None:
        if not phone:
            return None
        customers = self._dao.query.filter(phone=phone.strip()).limit(1).all().items
        return customers[0] if customers else None
