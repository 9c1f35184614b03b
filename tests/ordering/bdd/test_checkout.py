"""BDD tests for filling a cart and checking out."""

from notifications.channel import get_channel
from ordering.cart.cart import ShoppingCart
from ordering.cart.items import AddToCart
from ordering.cart.management import CreateCart
from ordering.checkout.checkout import MissingAddress, PlaceOrder
from ordering.order.order import Order
from protean import current_domain
from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/checkout.feature")

CARD = {
    "card_number": "5555 4444 3333 1111",
    "card_holder": "MARIA SILVA",
    "card_expiry": "08/29",
    "card_cvv": "321",
}


def add_to_cart(cart_id, name, price, quantity, observation=None):
    return current_domain.process(
        AddToCart(
            cart_id=cart_id,
            product_id=name.lower().replace(" ", "-"),
            name=name,
            price=price,
            quantity=quantity,
            observation=observation,
        ),
        asynchronous=False,
    )


def cart_of(state):
    return current_domain.repository_for(ShoppingCart).get(state["cart_id"])


def _check_out(state, **details):
    command = PlaceOrder(
        cart_id=state["cart_id"],
        customer_name="Maria",
        customer_phone="21999990000",
        customer_address="Rua A, 1",
        **details,
    )
    try:
        state["order_id"] = current_domain.process(command, asynchronous=False)
    except MissingAddress as exc:
        state["error"] = exc


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a cart for session "{session_id}"'))
def a_cart(session_id, state):
    state["cart_id"] = current_domain.process(CreateCart(session_id=session_id), asynchronous=False)


@given(parsers.cfparse('the cart holds {quantity:d} "{name}" at {price:f}'))
def cart_holds(quantity, name, price, state):
    add_to_cart(state["cart_id"], name, price, quantity)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the shopper adds {quantity:d} "{name}" at {price:f}'))
def shopper_adds(quantity, name, price, state):
    add_to_cart(state["cart_id"], name, price, quantity)


@when(parsers.cfparse('the shopper adds {quantity:d} "{name}" at {price:f} with observation "{observation}"'))
def shopper_adds_with_observation(quantity, name, price, observation, state):
    add_to_cart(state["cart_id"], name, price, quantity, observation)


@when(parsers.cfparse('the shopper checks out for delivery to "{address}" paying with "{method}"'))
def check_out_for_delivery(address, method, state):
    _check_out(state, payment_method=method, fulfillment_type="delivery", delivery_address=address)


@when(parsers.cfparse('the shopper checks out for pickup paying with "{method}"'))
def check_out_for_pickup(method, state):
    card = CARD if method == "card" else {}
    _check_out(state, payment_method=method, fulfillment_type="pickup", **card)


@when("the shopper checks out for delivery without an address")
def check_out_without_address(state):
    _check_out(state, payment_method="pix", fulfillment_type="delivery")


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_lines(count, state):
    assert len(cart_of(state).lines) == count


@then(parsers.cfparse("the cart holds {count:d} items totalling {total:f}"))
def cart_totals(count, total, state):
    cart = cart_of(state)
    assert cart.total_items() == count
    assert cart.total_price() == round(total, 2)


@then(parsers.cfparse("an order is placed with delivery fee {fee:f} and total {total:f}"))
def order_placed(fee, total, state):
    order = current_domain.repository_for(Order).get(state["order_id"])
    assert order.delivery_fee == round(fee, 2)
    assert order.total == round(total, 2)


@then("the cart is empty")
def cart_is_empty(state):
    assert cart_of(state).total_items() == 0


@then("the restaurant receives the order on WhatsApp")
def restaurant_notified(state):
    order = current_domain.repository_for(Order).get(state["order_id"])
    messages = get_channel("fake").sent_messages
    assert len(messages) == 1
    assert order.reference in messages[0]["body"]


@then("the checkout is refused for a missing address")
def refused_for_address(state):
    assert "delivery_address" in state["error"].messages


@then("no order is placed")
def no_order(state):
    assert current_domain.repository_for(Order).all_orders() == []


@then(parsers.cfparse("the cart still holds {count:d} items"))
def cart_still_holds(count, state):
    assert cart_of(state).total_items() == count
