"""Pydantic request/response schemas for the Menu API."""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class CategoryRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class ReorderRequest(BaseModel):
    """Ordered ids as returned by the sortable list."""

    ids: list[str]


class ProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "X-Burguer Artesanal",
                    "description": "Hambúrguer artesanal com blend especial.",
                    "price": 24.90,
                    "category_id": "0b6f6c1e-4c1a-4c36-9d0f-3a2a9d5f7c11",
                    "serves": "1 pessoa",
                    "tags": ["artesanal"],
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str
    price: float = Field(ge=0)
    category_id: str
    original_price: float | None = Field(None, ge=0)
    image: str | None = None
    serves: str | None = Field(None, max_length=50)
    volume: str | None = Field(None, max_length=50)
    is_available: bool = True
    is_featured: bool = False
    tags: list[str] | None = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class CategoryIdResponse(BaseModel):
    category_id: str


class ProductIdResponse(BaseModel):
    product_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class CategoryResponse(BaseModel):
    id: str
    name: str
    display_order: int


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str
    price: float
    original_price: float | None = None
    category_id: str
    category_name: str
    image: str | None = None
    serves: str | None = None
    volume: str | None = None
    is_available: bool
    is_featured: bool
    tags: list[str] = []
    display_order: int


class MenuResponse(BaseModel):
    featured: list[ProductResponse]
    regular: list[ProductResponse]
