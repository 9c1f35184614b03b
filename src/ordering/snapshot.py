"""Product snapshot embedded in cart and order lines."""

from protean.fields import Float, Identifier, String

from ordering.domain import ordering


@ordering.value_object
class ProductSnapshot:
    """An independent copy of the product as it was when it was picked.

    Later admin edits to the product never reach a line holding a snapshot.
    ``original_price`` is carried for display only.
    """

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    original_price = Float(min_value=0.0)
