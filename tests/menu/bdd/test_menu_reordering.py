"""BDD tests for menu reordering and category removal."""

import json

from menu import catalog
from menu.category.management import RemoveCategory, ReorderCategories
from menu.product.management import ReorderProducts
from protean import current_domain
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/menu_reordering.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse("the categories are reordered as {raw}"))
def reorder_categories(raw, names, menu_ids):
    ids = [menu_ids["categories"][name] for name in names(raw)]
    current_domain.process(ReorderCategories(category_ids=json.dumps(ids)), asynchronous=False)


@when(parsers.cfparse('the category "{category}" is removed'))
def remove_category(category, menu_ids):
    current_domain.process(RemoveCategory(category_id=menu_ids["categories"][category]), asynchronous=False)


@when(parsers.cfparse('the products of "{category}" are reordered as {raw}'))
def reorder_products(category, raw, names, menu_ids):
    ids = [menu_ids["products"][name] for name in names(raw)]
    current_domain.process(
        ReorderProducts(category_id=menu_ids["categories"][category], product_ids=json.dumps(ids)),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the menu lists the categories as {raw}"))
def categories_listed_as(raw, names):
    assert [c.name for c in catalog.list_categories()] == names(raw)


@then(parsers.cfparse('the product "{product}" is listed under "{category_name}"'))
def product_listed_under(product, category_name, menu_ids):
    listed = {str(p.id): p for p in catalog.list_products()}
    listed_product = listed[menu_ids["products"][product]]
    assert catalog.category_name(listed_product.category_id) == category_name


@then(parsers.cfparse('the products of "{category}" are listed as {raw}'))
def products_listed_as(category, raw, names, menu_ids):
    products = catalog.list_products(category_id=menu_ids["categories"][category])
    assert [p.name for p in products] == names(raw)
