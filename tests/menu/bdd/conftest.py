"""Shared BDD fixtures and step definitions for the Menu domain."""

import pytest
from menu.category.management import AddCategory
from menu.product.management import AddProduct
from protean import current_domain
from pytest_bdd import given, parsers


def _names(raw: str) -> list[str]:
    """Split '"A", "B" and "C"' into ['A', 'B', 'C']."""
    return [part.strip().strip('"') for part in raw.replace(" and ", ", ").split(",") if part.strip()]


@pytest.fixture()
def names():
    return _names


@pytest.fixture()
def menu_ids():
    """Category and product ids by name, filled by the Given steps."""
    return {"categories": {}, "products": {}}


@given(parsers.cfparse("the menu has categories {raw}"))
def menu_has_categories(raw, menu_ids):
    for name in _names(raw):
        menu_ids["categories"][name] = current_domain.process(AddCategory(name=name), asynchronous=False)


@given(parsers.cfparse('the category "{category}" has a product "{product}"'))
def category_has_product(category, product, menu_ids):
    menu_ids["products"][product] = current_domain.process(
        AddProduct(
            name=product,
            description=f"{product} da casa",
            price=12.0,
            category_id=menu_ids["categories"][category],
        ),
        asynchronous=False,
    )
