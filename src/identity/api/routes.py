"""FastAPI endpoints for the Identity domain."""

from fastapi import APIRouter, HTTPException
from protean.utils.globals import current_domain

from identity.api.schemas import (
    CustomerIdResponse,
    CustomerResponse,
    LoginRequest,
    RegisterCustomerRequest,
)
from identity.customer.authentication import authenticate
from identity.customer.customer import Customer
from identity.customer.registration import RegisterCustomer

router = APIRouter(prefix="/customers", tags=["customers"])


def _customer_response(customer: Customer) -> CustomerResponse:
    return CustomerResponse(
        id=str(customer.id),
        name=customer.name,
        phone=customer.phone,
        address=customer.address,
    )


@router.post("", status_code=201, response_model=CustomerIdResponse)
async def register_customer(body: RegisterCustomerRequest) -> CustomerIdResponse:
    command = RegisterCustomer(
        name=body.name,
        phone=body.phone,
        address=body.address,
        password=body.password,
    )
    result = current_domain.process(command, asynchronous=False)
    return CustomerIdResponse(customer_id=result)


@router.post("/login", response_model=CustomerResponse)
async def login(body: LoginRequest) -> CustomerResponse:
    customer = authenticate(body.phone, body.password)
    if customer is None:
        raise HTTPException(status_code=401, detail="Invalid phone or password")
    return _customer_response(customer)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: str) -> CustomerResponse:
    customer = current_domain.repository_for(Customer).find(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return _customer_response(customer)
