"""FastAPI routes for the Ordering domain — carts, orders and deliveries."""

from fastapi import APIRouter, HTTPException
from protean.utils.globals import current_domain

from identity.customer.customer import Customer
from identity.domain import identity
from menu.catalog import product_snapshot
from menu.domain import menu
from ordering.api.schemas import (
    AddToCartRequest,
    AssignCourierRequest,
    AssignmentIdResponse,
    AssignmentResponse,
    CartIdResponse,
    CartResponse,
    CheckoutRequest,
    CreateCartRequest,
    CustomerInfoResponse,
    LineIdResponse,
    LineResponse,
    OrderIdResponse,
    OrderResponse,
    SetQuantityRequest,
    StatusResponse,
    UpdateStatusRequest,
)
from ordering.cart.cart import ShoppingCart
from ordering.cart.items import AddToCart, RemoveFromCart, SetCartQuantity
from ordering.cart.management import ClearCart, CreateCart
from ordering.checkout.checkout import PlaceOrder
from ordering.delivery.management import AssignCourier, UpdateDeliveryStatus
from ordering.delivery.queue import active_assignments, ready_for_assignment
from ordering.order.order import Order
from ordering.order.status import AdvanceOrder, UpdateOrderStatus


def _line_response(line) -> LineResponse:
    return LineResponse(
        id=str(line.id),
        product_id=str(line.product.product_id),
        name=line.product.name,
        price=line.product.price,
        original_price=line.product.original_price,
        quantity=line.quantity,
        observation=line.observation,
        line_total=round(line.line_total, 2),
    )


def _order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=str(order.id),
        reference=order.reference,
        status=order.status,
        customer=CustomerInfoResponse(
            name=order.customer.name,
            phone=order.customer.phone,
            address=order.customer.address,
        ),
        lines=[_line_response(line) for line in order.lines],
        payment_method=order.payment_method,
        fulfillment_type=order.fulfillment_type,
        delivery_address=order.delivery_address,
        subtotal=order.subtotal,
        delivery_fee=order.delivery_fee,
        total=order.total,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.post("", status_code=201, response_model=CartIdResponse)
async def create_cart(body: CreateCartRequest) -> CartIdResponse:
    result = current_domain.process(CreateCart(session_id=body.session_id), asynchronous=False)
    return CartIdResponse(cart_id=result)


@cart_router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str) -> CartResponse:
    cart = current_domain.repository_for(ShoppingCart).get(cart_id)
    return CartResponse(
        id=str(cart.id),
        lines=[_line_response(line) for line in cart.lines],
        total_items=cart.total_items(),
        total_price=cart.total_price(),
    )


@cart_router.post("/{cart_id}/items", status_code=201, response_model=LineIdResponse)
async def add_cart_item(cart_id: str, body: AddToCartRequest) -> LineIdResponse:
    with menu.domain_context():
        snapshot = product_snapshot(body.product_id)
    if snapshot is None:
        raise HTTPException(status_code=404, detail="Product not found")
    if not snapshot["is_available"]:
        raise HTTPException(status_code=422, detail="Product is not available")

    command = AddToCart(
        cart_id=cart_id,
        product_id=snapshot["product_id"],
        name=snapshot["name"],
        price=snapshot["price"],
        original_price=snapshot["original_price"],
        quantity=body.quantity,
        observation=body.observation,
    )
    result = current_domain.process(command, asynchronous=False)
    return LineIdResponse(line_id=result)


@cart_router.put("/{cart_id}/items/{line_id}", response_model=StatusResponse)
async def set_cart_quantity(cart_id: str, line_id: str, body: SetQuantityRequest) -> StatusResponse:
    command = SetCartQuantity(cart_id=cart_id, line_id=line_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{cart_id}/items/{line_id}", response_model=StatusResponse)
async def remove_cart_item(cart_id: str, line_id: str) -> StatusResponse:
    current_domain.process(RemoveFromCart(cart_id=cart_id, line_id=line_id), asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{cart_id}/items", response_model=StatusResponse)
async def clear_cart(cart_id: str) -> StatusResponse:
    current_domain.process(ClearCart(cart_id=cart_id), asynchronous=False)
    return StatusResponse()


@cart_router.post("/{cart_id}/checkout", status_code=201, response_model=OrderIdResponse)
async def checkout(cart_id: str, body: CheckoutRequest) -> OrderIdResponse:
    with identity.domain_context():
        customer = current_domain.repository_for(Customer).find(body.customer_id)
    if customer is None:
        raise HTTPException(status_code=401, detail="Log in before checking out")

    command = PlaceOrder(
        cart_id=cart_id,
        customer_name=customer.name,
        customer_phone=customer.phone,
        customer_address=customer.address,
        payment_method=body.payment_method,
        card_number=body.card_number,
        card_holder=body.card_holder,
        card_expiry=body.card_expiry,
        card_cvv=body.card_cvv,
        fulfillment_type=body.fulfillment_type,
        delivery_address=body.delivery_address,
        total=body.total,
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(status: str | None = None, phone: str | None = None) -> list[OrderResponse]:
    repo = current_domain.repository_for(Order)
    if phone:
        orders = repo.by_customer_phone(phone)
    elif status:
        orders = repo.by_status(status)
    else:
        orders = repo.all_orders()
    return [_order_response(order) for order in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    order = current_domain.repository_for(Order).find(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return _order_response(order)


@order_router.put("/{order_id}/status", response_model=StatusResponse)
async def update_order_status(order_id: str, body: UpdateStatusRequest) -> StatusResponse:
    current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return StatusResponse()


@order_router.post("/{order_id}/advance", response_model=StatusResponse)
async def advance_order(order_id: str) -> StatusResponse:
    current_domain.process(AdvanceOrder(order_id=order_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Delivery Router
# ---------------------------------------------------------------------------
delivery_router = APIRouter(prefix="/deliveries", tags=["deliveries"])


def _assignment_response(assignment) -> AssignmentResponse:
    return AssignmentResponse(
        id=str(assignment.id),
        order_id=str(assignment.order_id),
        courier_name=assignment.courier_name,
        courier_phone=assignment.courier_phone,
        estimated_time=assignment.estimated_time,
        status=assignment.status,
        assigned_at=assignment.assigned_at,
    )


@delivery_router.get("", response_model=list[AssignmentResponse])
async def list_active_assignments() -> list[AssignmentResponse]:
    return [_assignment_response(a) for a in active_assignments()]


@delivery_router.get("/ready-orders", response_model=list[OrderResponse])
async def list_ready_orders() -> list[OrderResponse]:
    return [_order_response(order) for order in ready_for_assignment()]


@delivery_router.post("", status_code=201, response_model=AssignmentIdResponse)
async def assign_courier(body: AssignCourierRequest) -> AssignmentIdResponse:
    command = AssignCourier(
        order_id=body.order_id,
        courier_name=body.courier_name,
        courier_phone=body.courier_phone,
        estimated_time=body.estimated_time,
    )
    result = current_domain.process(command, asynchronous=False)
    return AssignmentIdResponse(assignment_id=result)


@delivery_router.put("/{assignment_id}/status", response_model=StatusResponse)
async def update_delivery_status(assignment_id: str, body: UpdateStatusRequest) -> StatusResponse:
    command = UpdateDeliveryStatus(assignment_id=assignment_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
