"""Menu domain API package."""

from menu.api.routes import category_router, product_router

__all__ = ["product_router", "category_router"]
