"""Cart line management — commands and handler.

``AddToCart`` carries the product snapshot taken from the menu at the moment
the shopper picked it; the cart never looks products up itself.
"""

from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering
from ordering.snapshot import ProductSnapshot


@ordering.command(part_of="ShoppingCart")
class AddToCart:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    original_price = Float(min_value=0.0)
    quantity = Integer(default=1, min_value=1)
    observation = String(max_length=500)


@ordering.command(part_of="ShoppingCart")
class SetCartQuantity:
    """Set a line's quantity; zero or less removes it."""

    cart_id = Identifier(required=True)
    line_id = Identifier(required=True)
    quantity = Integer(required=True)


@ordering.command(part_of="ShoppingCart")
class RemoveFromCart:
    cart_id = Identifier(required=True)
    line_id = Identifier(required=True)


@ordering.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        line_id = cart.add_item(
            ProductSnapshot(
                product_id=command.product_id,
                name=command.name,
                price=command.price,
                original_price=command.original_price,
            ),
            quantity=command.quantity,
            observation=command.observation,
        )
        repo.add(cart)
        return line_id

    @handle(SetCartQuantity)
    def set_cart_quantity(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.set_quantity(command.line_id, command.quantity)
        repo.add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.remove_item(command.line_id)
        repo.add(cart)
