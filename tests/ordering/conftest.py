import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def product_a():
    """Snapshot of a product priced at 10.00, with a discount shown."""
    return {"product_id": "prod-a", "name": "X-Burguer", "price": 10.0, "original_price": 12.0}


@pytest.fixture()
def product_b():
    return {"product_id": "prod-b", "name": "Suco de Laranja", "price": 7.5, "original_price": None}
