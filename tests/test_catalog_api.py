"""
Store, product, AI description and upload endpoints
"""
import cloudinary.utils

from storefront.api.deps import get_text_generation_client
from storefront.config import settings
from storefront.main import app
from storefront.services.text_generation_client import TextGenerationError
from tests.helpers import FakeTextClient


def test_create_and_get_storefront(client, store, make_product):
    make_product(store, name="Vase")
    created = client.post("/stores", json={"name": "Beta Shop", "slug": "beta-shop"})
    
    assert created.status_code == 201
    assert created.json()["slug"] == "beta-shop"
    
    response = client.get("/stores/acme")
    assert response.status_code == 200
    assert [p["name"] for p in response.json()["products"]] == ["Vase"]
    
    assert {s["slug"] for s in client.get("/stores").json()} == {"acme", "beta-shop"}


def test_create_store_duplicate_slug(client, store):
    response = client.post("/stores", json={"name": "Again", "slug": "acme"})
    
    assert response.status_code == 409


def test_create_store_rejects_unsafe_slug(client):
    response = client.post("/stores", json={"name": "Bad", "slug": "Bad Slug!"})
    
    assert response.status_code == 422


def test_unknown_storefront(client):
    assert client.get("/stores/nope").status_code == 404


def test_update_store_settings(client, store, other_store, auth_headers):
    response = client.patch(
        f"/stores/{store.id}",
        json={"about": "Handmade goods", "primaryColor": "#112233"},
        headers=auth_headers
    )
    
    assert response.status_code == 200
    assert response.json()["about"] == "Handmade goods"
    assert response.json()["primaryColor"] == "#112233"
    
    taken = client.patch(f"/stores/{store.id}", json={"slug": "other"}, headers=auth_headers)
    assert taken.status_code == 409
    
    foreign = client.patch(f"/stores/{other_store.id}", json={"about": "x"}, headers=auth_headers)
    assert foreign.status_code == 403


def test_create_product(client, store, auth_headers):
    response = client.post("/products", json={
        "name": "Teapot",
        "price": 24.5,
        "sku": "TEA-1",
        "storeId": store.id,
        "stock": 7
    }, headers=auth_headers)
    
    assert response.status_code == 201
    body = response.json()
    assert body["price"] == 24.5
    assert body["active"] is True
    assert body["storeId"] == store.id


def test_create_product_duplicate_sku(client, store, make_product, auth_headers):
    make_product(store, sku="DUP")
    
    response = client.post("/products", json={
        "name": "Copy", "price": 1, "sku": "DUP", "storeId": store.id
    }, headers=auth_headers)
    
    assert response.status_code == 409
    assert response.json()["detail"] == "Product with SKU 'DUP' already exists."


def test_create_product_rejects_negative_values(client, store, auth_headers):
    response = client.post("/products", json={
        "name": "Bad", "price": -1, "sku": "NEG", "storeId": store.id, "stock": -2
    }, headers=auth_headers)
    
    assert response.status_code == 422


def test_create_product_requires_auth(client, store):
    response = client.post("/products", json={
        "name": "Teapot", "price": 1, "sku": "T", "storeId": store.id
    })
    
    assert response.status_code == 401


def test_list_and_get_products(client, store, other_store, make_product):
    mine = make_product(store)
    make_product(other_store)
    
    listed = client.get("/products", params={"store_id": store.id})
    
    assert [p["id"] for p in listed.json()] == [mine.id]
    assert len(client.get("/products").json()) == 2
    assert client.get(f"/products/{mine.id}").json()["sku"] == mine.sku
    assert client.get("/products/9999").status_code == 404


def test_update_product_keeps_sku(client, store, make_product, auth_headers):
    product = make_product(store, sku="KEEP", price="3.00")
    
    response = client.patch(
        f"/products/{product.id}",
        json={"price": 4.25, "active": False, "sku": "CHANGED"},
        headers=auth_headers
    )
    
    assert response.status_code == 200
    body = response.json()
    assert body["price"] == 4.25
    assert body["active"] is False
    assert body["sku"] == "KEEP"


def test_update_product_of_other_store(client, other_store, make_product, auth_headers):
    product = make_product(other_store)
    
    response = client.patch(f"/products/{product.id}", json={"stock": 1}, headers=auth_headers)
    
    assert response.status_code == 403


def test_generate_description_fallback(client, auth_headers):
    response = client.post("/ai/description", json={"name": "Aero", "category": "Shoes"}, headers=auth_headers)
    
    assert response.status_code == 200
    assert response.json()["description"] == (
        "[MOCK AI] Experience the ultimate Shoes with the new Aero. Designed for performance "
        "and style. (Real AI requires GEMINI_API_KEY in .env)"
    )


def test_generate_description_from_model(client, auth_headers):
    fake = FakeTextClient(reply="Fast shoes.")
    app.dependency_overrides[get_text_generation_client] = lambda: fake
    
    response = client.post("/ai/description", json={"name": "Aero", "category": "Shoes"}, headers=auth_headers)
    
    assert response.json() == {"description": "Fast shoes."}
    assert '"Aero"' in fake.prompts[0]


def test_generate_description_recovers_from_model_error(client, auth_headers):
    app.dependency_overrides[get_text_generation_client] = lambda: FakeTextClient(
        error=TextGenerationError("Unexpected status code: 500")
    )
    
    response = client.post("/ai/description", json={"name": "Aero", "category": "Shoes"}, headers=auth_headers)
    
    assert response.status_code == 200
    assert response.json()["description"].startswith("[MOCK AI]")


def test_upload_signature_unconfigured(client, auth_headers):
    response = client.get("/uploads/signature", headers=auth_headers)
    
    assert response.status_code == 503


def test_upload_signature(client, auth_headers, monkeypatch):
    monkeypatch.setattr(settings, "CLOUDINARY_CLOUD_NAME", "demo")
    monkeypatch.setattr(settings, "CLOUDINARY_API_KEY", "key-1")
    monkeypatch.setattr(settings, "CLOUDINARY_API_SECRET", "shh")
    
    response = client.get("/uploads/signature", headers=auth_headers)
    
    assert response.status_code == 200
    body = response.json()
    assert body["cloudName"] == "demo"
    assert body["apiKey"] == "key-1"
    assert body["signature"] == cloudinary.utils.api_sign_request({"timestamp": body["timestamp"]}, "shh")


def test_health(client):
    response = client.get("/health")
    
    assert response.status_code == 200
    assert response.json()["database"] == "healthy"
    assert response.json()["text_generation"] == "fallback"
