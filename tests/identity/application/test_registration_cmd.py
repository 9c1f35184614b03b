"""Application tests for registration and login."""

import pytest
from identity.customer.authentication import authenticate
from identity.customer.customer import Customer
from identity.customer.registration import RegisterCustomer
from protean import current_domain
from protean.exceptions import ValidationError


def _register(**overrides):
    defaults = {
        "name": "Maria Silva",
        "phone": "21999990000",
        "address": "Rua das Flores, 123",
        "password": "segredo",
    }
    defaults.update(overrides)
    return current_domain.process(RegisterCustomer(**defaults), asynchronous=False)


class TestRegisterCustomer:
    def test_register_persists_customer(self):
        customer_id = _register()
        customer = current_domain.repository_for(Customer).get(customer_id)
        assert customer.name == "Maria Silva"
        assert customer.check_password("segredo")

    def test_duplicate_phone_is_rejected(self):
        _register()
        with pytest.raises(ValidationError) as exc:
            _register(name="Outra Maria")
        assert "phone" in exc.value.messages

    def test_find_by_phone(self):
        customer_id = _register()
        repo = current_domain.repository_for(Customer)
        assert str(repo.find_by_phone("21999990000").id) == customer_id
        assert repo.find_by_phone("21000000000") is None
        assert repo.find_by_phone(None) is None

    def test_find_unknown_id(self):
        assert current_domain.repository_for(Customer).find("nobody") is None


class TestAuthenticate:
    def test_valid_credentials(self):
        customer_id = _register()
        customer = authenticate("21999990000", "segredo")
        assert str(customer.id) == customer_id

    def test_login_is_recorded(self):
        customer_id = _register()
        authenticate("21999990000", "segredo")
        assert current_domain.repository_for(Customer).get(customer_id).last_login_at is not None

    def test_wrong_password(self):
        _register()
        assert authenticate("21999990000", "errada") is None

    def test_unknown_phone(self):
        assert authenticate("21000000000", "segredo") is None
