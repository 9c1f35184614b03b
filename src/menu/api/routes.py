"""FastAPI routes for the Menu domain — categories and products."""

import json

from fastapi import APIRouter, HTTPException
from protean.utils.globals import current_domain

from menu import catalog
from menu.api.schemas import (
    CategoryIdResponse,
    CategoryRequest,
    CategoryResponse,
    MenuResponse,
    ProductIdResponse,
    ProductRequest,
    ProductResponse,
    ReorderRequest,
    StatusResponse,
)
from menu.category.management import AddCategory, RemoveCategory, RenameCategory, ReorderCategories
from menu.product.management import AddProduct, RemoveProduct, ReorderProducts, UpdateProduct
from menu.product.product import Product


def _product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        original_price=product.original_price,
        category_id=str(product.category_id),
        category_name=catalog.category_name(product.category_id),
        image=product.image,
        serves=product.serves,
        volume=product.volume,
        is_available=product.is_available,
        is_featured=product.is_featured,
        tags=product.tag_list,
        display_order=product.display_order,
    )


# ---------------------------------------------------------------------------
# Category Router
# ---------------------------------------------------------------------------
category_router = APIRouter(prefix="/categories", tags=["categories"])


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    return [
        CategoryResponse(id=str(c.id), name=c.name, display_order=c.display_order) for c in catalog.list_categories()
    ]


@category_router.post("", status_code=201, response_model=CategoryIdResponse)
async def add_category(body: CategoryRequest) -> CategoryIdResponse:
    result = current_domain.process(AddCategory(name=body.name), asynchronous=False)
    return CategoryIdResponse(category_id=result)


@category_router.post("/reorder", response_model=StatusResponse)
async def reorder_categories(body: ReorderRequest) -> StatusResponse:
    current_domain.process(ReorderCategories(category_ids=json.dumps(body.ids)), asynchronous=False)
    return StatusResponse()


@category_router.put("/{category_id}", response_model=StatusResponse)
async def rename_category(category_id: str, body: CategoryRequest) -> StatusResponse:
    current_domain.process(RenameCategory(category_id=category_id, name=body.name), asynchronous=False)
    return StatusResponse()


@category_router.delete("/{category_id}", response_model=StatusResponse)
async def remove_category(category_id: str) -> StatusResponse:
    current_domain.process(RemoveCategory(category_id=category_id), asynchronous=False)
    return StatusResponse()


@category_router.post("/{category_id}/products/reorder", response_model=StatusResponse)
async def reorder_products(category_id: str, body: ReorderRequest) -> StatusResponse:
    current_domain.process(
        ReorderProducts(category_id=category_id, product_ids=json.dumps(body.ids)),
        asynchronous=False,
    )
    return StatusResponse()


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def list_products(category_id: str | None = None, search: str | None = None) -> list[ProductResponse]:
    return [_product_response(p) for p in catalog.list_products(category_id, search)]


@product_router.get("/menu", response_model=MenuResponse)
async def storefront_menu(category_id: str | None = None, search: str | None = None) -> MenuResponse:
    """Products split the way the storefront renders them."""
    return MenuResponse(
        featured=[_product_response(p) for p in catalog.featured_products(category_id, search)],
        regular=[_product_response(p) for p in catalog.regular_products(category_id, search)],
    )


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).find(product_id)
    if product is None or product.is_archived:
        raise HTTPException(status_code=404, detail="Product not found")
    return _product_response(product)


def _product_fields(body: ProductRequest) -> dict:
    return {
        "name": body.name,
        "description": body.description,
        "price": body.price,
        "category_id": body.category_id,
        "original_price": body.original_price,
        "image": body.image,
        "serves": body.serves,
        "volume": body.volume,
        "is_available": body.is_available,
        "is_featured": body.is_featured,
        "tags": json.dumps(body.tags) if body.tags is not None else None,
    }


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: ProductRequest) -> ProductIdResponse:
    result = current_domain.process(AddProduct(**_product_fields(body)), asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.put("/{product_id}", response_model=StatusResponse)
async def update_product(product_id: str, body: ProductRequest) -> StatusResponse:
    current_domain.process(UpdateProduct(product_id=product_id, **_product_fields(body)), asynchronous=False)
    return StatusResponse()


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def remove_product(product_id: str) -> StatusResponse:
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()
