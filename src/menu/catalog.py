"""Catalog read paths used by the storefront and the cart.

All functions must run inside the menu domain context.
"""

from protean.utils.globals import current_domain

from menu.category.category import Category
from menu.product.product import Product

UNKNOWN_CATEGORY = "Unknown"


def list_categories() -> list[Category]:
    return current_domain.repository_for(Category).active()


def category_name(category_id) -> str:
    """Name of the category, or ``Unknown`` for orphaned references."""
    category = current_domain.repository_for(Category).find(category_id)
    if category is None or not category.is_active:
        return UNKNOWN_CATEGORY
    return category.name


def _matches(product: Product, query: str, category_names: dict) -> bool:
    return (
        query in product.name.lower()
        or query in product.description.lower()
        or query in category_names.get(str(product.category_id), "")
        or any(query in tag.lower() for tag in product.tag_list)
    )


def list_products(category_id=None, search=None) -> list[Product]:
    """Listed products, optionally narrowed by category and a search string."""
    repo = current_domain.repository_for(Product)
    products = repo.in_category(category_id) if category_id else repo.listed()

    if search and search.strip():
        query = search.strip().lower()
        category_names = {str(c.id): c.name.lower() for c in list_categories()}
        products = [p for p in products if _matches(p, query, category_names)]

    return products


def featured_products(category_id=None, search=None) -> list[Product]:
    return [p for p in list_products(category_id, search) if p.is_featured]


def regular_products(category_id=None, search=None) -> list[Product]:
    return [p for p in list_products(category_id, search) if not p.is_featured]


def product_snapshot(product_id) -> dict | None:
    """Copy of the fields a cart line embeds, or None for unknown/removed products."""
    product = current_domain.repository_for(Product).find(product_id)
    if product is None or product.is_archived:
        return None

    return {
        "product_id": str(product.id),
        "name": product.name,
        "price": product.price,
        "original_price": product.original_price,
        "is_available": product.is_available,
    }
