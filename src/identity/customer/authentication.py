"""Phone and password login."""

from protean.utils.globals import current_domain

from identity.customer.customer import Customer
from identity.domain import logger


def authenticate(phone, password) -> Customer | None:
    """Return the customer for a matching phone/password pair, else None."""
    repo = current_domain.repository_for(Customer)
    customer = repo.find_by_phone(phone)
    if customer is None or not customer.check_password(password):
        logger.info("Login rejected", phone=phone)
        return None

    customer.record_login()
    repo.add(customer)
    return customer
