"""Restaurant-level settings.

Values come from the environment (prefix ``RESTAURANT_``) or a local ``.env``
file, falling back to the defaults below.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class RestaurantSettings(BaseSettings):
    name: str = "Toque de Amor Lanches e Hambúrguer"
    whatsapp_number: str = "5521976003669"
    pix_key: str = "luizfernando@tokdeamor.com.br"
    delivery_fee: float = 4.99
    minimum_order: float = 25.00
    small_order_surcharge: float = 2.00
    default_courier_eta: str = "30 minutos"
    is_open: bool = True

    model_config = SettingsConfigDict(
        env_prefix="RESTAURANT_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> RestaurantSettings:
    return RestaurantSettings()
