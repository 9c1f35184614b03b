"""Integration tests for the Menu API endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from menu.api.routes import category_router, product_router
from menu.category.category import Category
from menu.product.product import Product
from protean import current_domain
from shared.errors import install_error_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    install_error_handlers(app)
    app.include_router(category_router)
    app.include_router(product_router)
    return TestClient(app)


def _create_category(client, name="Lanches"):
    response = client.post("/categories", json={"name": name})
    assert response.status_code == 201
    return response.json()["category_id"]


def _create_product(client, category_id, **overrides):
    payload = {
        "name": "X-Burguer",
        "description": "Pão, hambúrguer e queijo",
        "price": 18.90,
        "category_id": category_id,
    }
    payload.update(overrides)
    response = client.post("/products", json=payload)
    assert response.status_code == 201
    return response.json()["product_id"]


class TestCategoryEndpoints:
    def test_list_categories_in_display_order(self, client):
        first = _create_category(client, "Lanches")
        second = _create_category(client, "Bebidas")

        response = client.get("/categories")
        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [first, second]

    def test_rename_category(self, client):
        category_id = _create_category(client, "Bebida")
        response = client.put(f"/categories/{category_id}", json={"name": "Bebidas"})
        assert response.status_code == 200
        assert current_domain.repository_for(Category).get(category_id).name == "Bebidas"

    def test_reorder_categories(self, client):
        first = _create_category(client, "Lanches")
        second = _create_category(client, "Bebidas")

        response = client.post("/categories/reorder", json={"ids": [second, first]})
        assert response.status_code == 200
        assert [c["id"] for c in client.get("/categories").json()] == [second, first]

    def test_remove_category(self, client):
        category_id = _create_category(client)
        response = client.delete(f"/categories/{category_id}")
        assert response.status_code == 200
        assert client.get("/categories").json() == []

    def test_remove_unknown_category_is_404(self, client):
        response = client.delete("/categories/does-not-exist")
        assert response.status_code == 404


class TestProductEndpoints:
    def test_create_product(self, client):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id, tags=["artesanal"])

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "X-Burguer"
        assert product.tag_list == ["artesanal"]

    def test_get_product_renders_category_name(self, client):
        category_id = _create_category(client, "Lanches")
        product_id = _create_product(client, category_id)

        response = client.get(f"/products/{product_id}")
        assert response.status_code == 200
        data = response.json()
        assert data["category_name"] == "Lanches"
        assert data["price"] == 18.90

    def test_orphaned_product_reads_unknown_category(self, client):
        category_id = _create_category(client, "Lanches")
        product_id = _create_product(client, category_id)
        client.delete(f"/categories/{category_id}")

        assert client.get(f"/products/{product_id}").json()["category_name"] == "Unknown"

    def test_get_missing_product_is_404(self, client):
        assert client.get("/products/does-not-exist").status_code == 404

    def test_list_products_with_search(self, client):
        category_id = _create_category(client)
        _create_product(client, category_id, name="X-Burguer")
        _create_product(client, category_id, name="Suco", description="Laranja natural")

        response = client.get("/products", params={"search": "laranja"})
        assert [p["name"] for p in response.json()] == ["Suco"]

    def test_storefront_menu_split(self, client):
        category_id = _create_category(client)
        _create_product(client, category_id, name="Destaque", is_featured=True)
        _create_product(client, category_id, name="Comum")

        data = client.get("/products/menu").json()
        assert [p["name"] for p in data["featured"]] == ["Destaque"]
        assert [p["name"] for p in data["regular"]] == ["Comum"]

    def test_update_product(self, client):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id)

        response = client.put(
            f"/products/{product_id}",
            json={
                "name": "X-Tudo",
                "description": "Completo",
                "price": 29.90,
                "category_id": category_id,
            },
        )
        assert response.status_code == 200
        assert current_domain.repository_for(Product).get(product_id).name == "X-Tudo"

    def test_reorder_products(self, client):
        category_id = _create_category(client)
        first = _create_product(client, category_id, name="A")
        second = _create_product(client, category_id, name="B")

        response = client.post(f"/categories/{category_id}/products/reorder", json={"ids": [second, first]})
        assert response.status_code == 200
        assert [p["name"] for p in client.get("/products", params={"category_id": category_id}).json()] == ["B", "A"]

    def test_remove_product(self, client):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id)

        assert client.delete(f"/products/{product_id}").status_code == 200
        assert client.get(f"/products/{product_id}").status_code == 404

    def test_invalid_product_is_422(self, client):
        category_id = _create_category(client)
        response = client.post(
            "/products",
            json={"name": "  ", "description": "x", "price": 1.0, "category_id": category_id},
        )
        assert response.status_code == 422
