"""Repository for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from menu.domain import menu
from menu.product.product import Product


@menu.repository(part_of=Product)
class ProductRepository:
    def listed(self) -> list[Product]:
        """Products still on the menu, in display order."""
        return self._dao.query.filter(is_archived=False).order_by("display_order").limit(None).all().items

    def in_category(self, category_id) -> list[Product]:
        query = self._dao.query.filter(is_archived=False, category_id=str(category_id))
        return query.order_by("display_order").limit(None).all().items

    def find(self, product_id) -> Product | None:
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            return None

    def next_display_order(self, category_id) -> int:
        return max((p.display_order for p in self.in_category(category_id)), default=0) + 1
