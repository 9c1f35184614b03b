"""Customer registration — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from identity.customer.customer import Customer
from identity.domain import identity, logger


@identity.command(part_of="Customer")
class RegisterCustomer:
    """Create a new shopper account."""

    name: String(required=True, max_length=255)
    phone: String(required=True, max_length=20)
    address: String(max_length=500)
    password: String(required=True, max_length=128)


@identity.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        repo = current_domain.repository_for(Customer)
        if repo.find_by_phone(command.phone) is not None:
            raise ValidationError({"phone": ["Phone number is already registered"]})

        customer = Customer.register(
            name=command.name,
            phone=command.phone,
            address=command.address,
            password=command.password,
        )
        repo.add(customer)
        logger.info("Customer registered", customer_id=str(customer.id))
        return str(customer.id)
