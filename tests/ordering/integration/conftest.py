"""Fixtures for the ordering API tests.

Adding to a cart reads the menu and checking out reads the customer account,
so both of those domains are initialized and seeded here as well.
"""

import pytest
from protean import current_domain


@pytest.fixture(scope="session")
def _menu_domain():
    from menu.domain import menu

    menu.init()
    return menu


@pytest.fixture(scope="session")
def _identity_domain():
    from identity.domain import identity

    identity.init()
    return identity


def _reset(domain):
    with domain.domain_context():
        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def menu_items(_menu_domain):
    """Two available products and one the kitchen has run out of."""
    from menu.category.management import AddCategory
    from menu.product.management import AddProduct

    with _menu_domain.domain_context():
        category_id = current_domain.process(AddCategory(name="Lanches"), asynchronous=False)
        ids = {}
        for key, name, price, available in (
            ("burger", "X-Burguer", 10.0, True),
            ("juice", "Suco de Laranja", 7.5, True),
            ("soldout", "X-Tudo", 25.0, False),
        ):
            ids[key] = current_domain.process(
                AddProduct(
                    name=name,
                    description=f"{name} da casa",
                    price=price,
                    category_id=category_id,
                    is_available=available,
                ),
                asynchronous=False,
            )

    yield ids

    _reset(_menu_domain)


@pytest.fixture()
def customer_id(_identity_domain):
    from identity.customer.registration import RegisterCustomer

    with _identity_domain.domain_context():
        result = current_domain.process(
            RegisterCustomer(name="Maria", phone="21999990000", address="Rua A, 1", password="segredo"),
            asynchronous=False,
        )

    yield result

    _reset(_identity_domain)
