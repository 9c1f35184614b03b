"""Tests for the delivery fee rules."""

import pytest
from ordering.checkout.pricing import delivery_fee_for
from shared.settings import RestaurantSettings


@pytest.fixture()
def settings():
    return RestaurantSettings(delivery_fee=4.99, minimum_order=25.0, small_order_surcharge=2.0)


class TestDeliveryFee:
    def test_pickup_is_free(self, settings):
        assert delivery_fee_for(10.0, "pickup", settings) == 0.0
        assert delivery_fee_for(100.0, "pickup", settings) == 0.0

    def test_delivery_at_or_above_minimum(self, settings):
        assert delivery_fee_for(25.0, "delivery", settings) == 4.99
        assert delivery_fee_for(60.0, "delivery", settings) == 4.99

    def test_delivery_below_minimum_adds_surcharge(self, settings):
        assert delivery_fee_for(24.99, "delivery", settings) == 6.99

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("RESTAURANT_DELIVERY_FEE", "6.50")
        monkeypatch.setenv("RESTAURANT_MINIMUM_ORDER", "40")
        settings = RestaurantSettings()
        assert delivery_fee_for(30.0, "delivery", settings) == 8.5
