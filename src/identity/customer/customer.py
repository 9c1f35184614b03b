"""Customer aggregate — a shopper account identified by phone number."""

import re
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from identity.customer.events import CustomerLoggedIn, CustomerRegistered
from identity.customer.passwords import hash_password, verify_password
from identity.domain import identity

_PHONE_PATTERN = re.compile(r"^\+?[\d\s\-()]+$")


@identity.aggregate
class Customer:
    """A shopper account.

    The phone number is the natural key: it is what the shopper logs in with
    and what order history is looked up by. The password is only ever stored
    hashed.
    """

    name: String(required=True, max_length=255)
    phone: String(required=True, max_length=20, unique=True)
    address: String(max_length=500)
    password_hash: String(required=True, max_length=255)
    registered_at: DateTime()
    last_login_at: DateTime()

    @classmethod
    def register(cls, name, phone, address, password):
        errors = {}
        if not name or not name.strip():
            errors["name"] = ["Name is required"]
        if not phone or not re.search(r"\d", phone) or not _PHONE_PATTERN.match(phone.strip()):
            errors["phone"] = [f"Invalid phone number: {phone!r}"]
        if not password:
            errors["password"] = ["Password is required"]
        if errors:
            raise ValidationError(errors)

        now = datetime.now(UTC)
        customer = cls(
            name=name.strip(),
            phone=phone.strip(),
            address=(address or "").strip() or None,
            password_hash=hash_password(password),
            registered_at=now,
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                name=customer.name,
                phone=customer.phone,
                registered_at=now,
            )
        )
        return customer

    def check_password(self, password) -> bool:
        return bool(password) and verify_password(password, self.password_hash)

    def record_login(self):
        now = datetime.now(UTC)
        self.last_login_at = now
        self.raise_(CustomerLoggedIn(customer_id=self.id, logged_in_at=now))
