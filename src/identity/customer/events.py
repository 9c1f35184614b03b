"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Identifier, String

from identity.domain import identity


@identity.event(part_of="Customer")
class CustomerRegistered:
    __version__ = 1

    customer_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    phone: String(required=True, max_length=20)
    registered_at: DateTime(required=True)


@identity.event(part_of="Customer")
class CustomerLoggedIn:
    __version__ = 1

    customer_id: Identifier(required=True)
    logged_in_at: DateTime(required=True)
