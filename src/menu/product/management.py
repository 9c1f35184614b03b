"""Product management — commands and handler.

Covers the admin screen: add, edit (whole-record replace), remove, and
persisting the order the sortable list hands back for one category.
"""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from menu.domain import logger, menu
from menu.product.product import Product


def _tags_from(raw):
    if raw is None:
        return None
    return json.loads(raw) if isinstance(raw, str) else raw


@menu.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    description = Text(required=True)
    price = Float(required=True, min_value=0.0)
    category_id = Identifier(required=True)
    original_price = Float(min_value=0.0)
    image = String(max_length=500)
    serves = String(max_length=50)
    volume = String(max_length=50)
    is_available = Boolean(default=True)
    is_featured = Boolean(default=False)
    tags = Text()  # JSON: list of tag strings


@menu.command(part_of="Product")
class UpdateProduct:
    """Replace a product record by id."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    description = Text(required=True)
    price = Float(required=True, min_value=0.0)
    category_id = Identifier(required=True)
    original_price = Float(min_value=0.0)
    image = String(max_length=500)
    serves = String(max_length=50)
    volume = String(max_length=50)
    is_available = Boolean(default=True)
    is_featured = Boolean(default=False)
    tags = Text()  # JSON: list of tag strings


@menu.command(part_of="Product")
class RemoveProduct:
    product_id = Identifier(required=True)


@menu.command(part_of="Product")
class ReorderProducts:
    """Persist the order produced by the sortable list for one category."""

    category_id = Identifier(required=True)
    product_ids = Text(required=True)  # JSON: ordered list of product IDs


@menu.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        repo = current_domain.repository_for(Product)
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            category_id=command.category_id,
            display_order=repo.next_display_order(command.category_id),
            original_price=command.original_price,
            image=command.image,
            serves=command.serves,
            volume=command.volume,
            is_available=command.is_available,
            is_featured=command.is_featured,
            tags=_tags_from(command.tags),
        )
        repo.add(product)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.replace_details(
            name=command.name,
            description=command.description,
            price=command.price,
            category_id=command.category_id,
            original_price=command.original_price,
            image=command.image,
            serves=command.serves,
            volume=command.volume,
            is_available=command.is_available,
            is_featured=command.is_featured,
            tags=_tags_from(command.tags),
        )
        repo.add(product)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.remove()
        repo.add(product)

    @handle(ReorderProducts)
    def reorder_products(self, command):
        product_ids = json.loads(command.product_ids) if isinstance(command.product_ids, str) else command.product_ids

        repo = current_domain.repository_for(Product)
        for position, product_id in enumerate(product_ids, start=1):
            product = repo.find(product_id)
            if product is None:
                logger.warning("Skipping unknown product in reorder", product_id=str(product_id))
                continue
            if str(product.category_id) != str(command.category_id):
                raise ValidationError({"product_ids": [f"Product {product_id} does not belong to this category"]})
            product.reorder(position)
            repo.add(product)
