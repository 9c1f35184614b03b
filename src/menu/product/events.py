"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String

from menu.domain import menu


@menu.event(part_of="Product")
class ProductAdded:
    """A new product was added to a category of the menu."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    category_id = Identifier(required=True)
    price = Float(required=True)
    display_order = Integer(required=True)


@menu.event(part_of="Product")
class ProductUpdated:
    """An admin edit replaced the product record."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    category_id = Identifier(required=True)
    price = Float(required=True)
    is_available = Boolean()


@menu.event(part_of="Product")
class ProductReordered:
    __version__ = 1

    product_id = Identifier(required=True)
    previous_order = Integer()
    new_order = Integer(required=True)


@menu.event(part_of="Product")
class ProductRemoved:
    __version__ = 1

    product_id = Identifier(required=True)
    removed_at = DateTime(required=True)
