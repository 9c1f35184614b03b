"""Product aggregate — a menu item that can be added to a cart."""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from menu.domain import menu
from menu.product.events import ProductAdded, ProductRemoved, ProductReordered, ProductUpdated


def _normalize_tags(tags):
    if not tags:
        return None
    cleaned = [tag.strip() for tag in tags if tag and tag.strip()]
    return json.dumps(cleaned) if cleaned else None


def _validate_details(name, description, price, category_id, original_price):
    errors = {}
    if not name or not name.strip():
        errors["name"] = ["Product name is required"]
    if not description or not description.strip():
        errors["description"] = ["Product description is required"]
    if not category_id:
        errors["category_id"] = ["Product category is required"]
    if price is None:
        errors["price"] = ["Product price is required"]
    elif price < 0:
        errors["price"] = ["Price cannot be negative"]
    if original_price is not None and original_price < 0:
        errors["original_price"] = ["Original price cannot be negative"]
    if errors:
        raise ValidationError(errors)


@menu.aggregate
class Product:
    """A menu item.

    ``original_price`` is only used to show a discount next to ``price``; it
    never takes part in cart or order totals. ``display_order`` is unique-ish
    within a category and is rewritten wholesale when the admin reorders.
    """

    name = String(required=True, max_length=255)
    description = Text(required=True)
    price = Float(required=True, min_value=0.0)
    original_price = Float(min_value=0.0)
    category_id = Identifier(required=True)
    image = String(max_length=500, default="/placeholder.svg")
    serves = String(max_length=50)
    volume = String(max_length=50)
    is_available = Boolean(default=True)
    is_featured = Boolean(default=False)
    tags = Text()  # JSON array of tag strings
    display_order = Integer(default=0)
    is_archived = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    @property
    def tag_list(self) -> list[str]:
        return json.loads(self.tags) if self.tags else []

    @property
    def has_discount(self) -> bool:
        return self.original_price is not None and self.original_price > self.price

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        name,
        description,
        price,
        category_id,
        display_order,
        original_price=None,
        image=None,
        serves=None,
        volume=None,
        is_available=True,
        is_featured=False,
        tags=None,
    ):
        _validate_details(name, description, price, category_id, original_price)

        now = datetime.now(UTC)
        product = cls(
            name=name.strip(),
            description=description.strip(),
            price=price,
            original_price=original_price,
            category_id=category_id,
            image=image or "/placeholder.svg",
            serves=serves or None,
            volume=volume or None,
            is_available=is_available,
            is_featured=is_featured,
            tags=_normalize_tags(tags),
            display_order=display_order,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=product.name,
                category_id=str(category_id),
                price=price,
                display_order=display_order,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Admin edits
    # -------------------------------------------------------------------
    def replace_details(
        self,
        name,
        description,
        price,
        category_id,
        original_price=None,
        image=None,
        serves=None,
        volume=None,
        is_available=True,
        is_featured=False,
        tags=None,
    ):
        """Replace every editable field. ``display_order`` is kept."""
        if self.is_archived:
            raise ValidationError({"product_id": ["Product has been removed"]})
        _validate_details(name, description, price, category_id, original_price)

        self.name = name.strip()
        self.description = description.strip()
        self.price = price
        self.original_price = original_price
        self.category_id = category_id
        self.image = image or "/placeholder.svg"
        self.serves = serves or None
        self.volume = volume or None
        self.is_available = is_available
        self.is_featured = is_featured
        self.tags = _normalize_tags(tags)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductUpdated(
                product_id=str(self.id),
                name=self.name,
                category_id=str(category_id),
                price=price,
                is_available=is_available,
            )
        )

    def reorder(self, new_display_order):
        previous_order = self.display_order
        if previous_order == new_display_order:
            return

        self.display_order = new_display_order
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductReordered(
                product_id=str(self.id),
                previous_order=previous_order,
                new_order=new_display_order,
            )
        )

    def remove(self):
        if self.is_archived:
            raise ValidationError({"product_id": ["Product has already been removed"]})

        self.is_archived = True
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(ProductRemoved(product_id=str(self.id), removed_at=now))
