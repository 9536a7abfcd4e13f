"""
Order and analytics endpoints
"""
import asyncio

from storefront.api.deps import get_text_generation_client
from storefront.main import app
from storefront.models import Order
from storefront.services.analytics_service import AnalyticsService
from storefront.services.text_generation_client import TextGenerationUnavailableError
from tests.helpers import FakeTextClient


def test_checkout_creates_order(client, store, make_product):
    product = make_product(store, price="10.00", stock=3)
    
    response = client.post("/orders", json={
        "storeId": store.id,
        "items": [{"productId": product.id, "quantity": 2}],
        "customerName": "Ada",
        "customerEmail": "ada@example.com",
        "shippingAddress": "1 Main St"
    })
    
    assert response.status_code == 201
    body = response.json()
    assert body["total"] == 20.0
    assert body["status"] == "PENDING"
    assert body["items"][0]["quantity"] == 2
    assert body["items"][0]["price"] == 10.0
    assert "createdAt" in body


def test_checkout_unknown_product(client, db, store):
    response = client.post("/orders", json={
        "storeId": store.id,
        "items": [{"productId": 555, "quantity": 1}]
    })
    
    assert response.status_code == 404
    assert response.json() == {"detail": "Product 555 not found", "code": "NOT_FOUND"}
    assert db.query(Order).count() == 0


def test_checkout_rejects_empty_items_and_bad_quantity(client, store, make_product):
    product = make_product(store)
    
    empty = client.post("/orders", json={"storeId": store.id, "items": []})
    zero = client.post("/orders", json={
        "storeId": store.id,
        "items": [{"productId": product.id, "quantity": 0}]
    })
    
    assert empty.status_code == 422
    assert zero.status_code == 422


def test_list_orders_requires_token(client, store):
    response = client.get(f"/stores/{store.id}/orders")
    
    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHENTICATED"


def test_list_orders_of_other_store_forbidden(client, store, other_headers):
    response = client.get(f"/stores/{store.id}/orders", headers=other_headers)
    
    assert response.status_code == 403
    assert response.json()["code"] == "UNAUTHORIZED"


def test_invalid_token_rejected(client, store):
    response = client.get(
        f"/stores/{store.id}/orders",
        headers={"Authorization": "Bearer not-a-token"}
    )
    
    assert response.status_code == 401


def test_list_orders_includes_products(client, store, make_product, place_order, auth_headers):
    product = make_product(store, name="Kettle")
    place_order(store, [(product, 3)])
    
    response = client.get(f"/stores/{store.id}/orders", params={"take": 5}, headers=auth_headers)
    
    assert response.status_code == 200
    orders = response.json()
    assert len(orders) == 1
    assert orders[0]["items"][0]["product"]["name"] == "Kettle"


def test_update_order_status(client, store, make_product, place_order, auth_headers):
    order = place_order(store, [(make_product(store), 1)])
    
    response = client.patch(f"/orders/{order.id}/status", json={"status": "SHIPPED"}, headers=auth_headers)
    
    assert response.status_code == 200
    assert response.json()["status"] == "SHIPPED"


def test_update_order_status_rejects_unknown_value(client, store, make_product, place_order, auth_headers):
    order = place_order(store, [(make_product(store), 1)])
    
    response = client.patch(f"/orders/{order.id}/status", json={"status": "LOST"}, headers=auth_headers)
    
    assert response.status_code == 422


def test_update_order_status_unknown_order(client, auth_headers):
    response = client.patch("/orders/999/status", json={"status": "SHIPPED"}, headers=auth_headers)
    
    assert response.status_code == 404


def test_update_order_status_other_store(client, store, make_product, place_order, other_headers):
    order = place_order(store, [(make_product(store), 1)])
    
    response = client.patch(f"/orders/{order.id}/status", json={"status": "SHIPPED"}, headers=other_headers)
    
    assert response.status_code == 403


def test_dashboard_stats(client, store, make_product, place_order, auth_headers):
    product = make_product(store, price="8.00", stock=4)
    place_order(store, [(product, 1)])
    place_order(store, [(product, 3)])
    
    response = client.get(f"/stores/{store.id}/dashboard-stats", headers=auth_headers)
    
    assert response.status_code == 200
    assert response.json() == {
        "totalRevenue": 32.0,
        "totalOrders": 2,
        "averageOrderValue": 16.0,
        "lowStockCount": 1,
        "totalProducts": 1
    }


def test_sales_chart(client, store, auth_headers):
    response = client.get(f"/stores/{store.id}/sales-chart", headers=auth_headers)
    
    assert response.status_code == 200
    points = response.json()
    assert len(points) == 7
    assert [p["date"] for p in points] == sorted(p["date"] for p in points)
    assert points[0] == {"date": points[0]["date"], "revenue": 0.0, "orders": 0}


def test_sales_summary_fallback_without_api_key(client, store, make_product, place_order, auth_headers):
    product = make_product(store, name="Mug", price="5.00")
    place_order(store, [(product, 4)])
    
    response = client.post(f"/stores/{store.id}/sales-summary", headers=auth_headers)
    
    assert response.status_code == 200
    assert response.json()["summary"] == (
        "[MOCK AI SUMMARY] Revenue: $20.00. Top Item: Mug (4 sold). (Add GEMINI_API_KEY for real insights)"
    )


def test_sales_summary_from_model(client, store, make_product, place_order, auth_headers):
    fake = FakeTextClient(reply="- Revenue is up")
    app.dependency_overrides[get_text_generation_client] = lambda: fake
    product = make_product(store, name="Mug", price="5.00", stock=2)
    place_order(store, [(product, 1)])
    
    response = client.post(f"/stores/{store.id}/sales-summary", headers=auth_headers)
    
    assert response.json() == {"summary": "- Revenue is up"}
    assert "Mug (1 sold)" in fake.prompts[0]
    assert "Mug (2 left)" in fake.prompts[0]


def test_sales_summary_upstream_failure(client, store, auth_headers):
    app.dependency_overrides[get_text_generation_client] = lambda: FakeTextClient(
        error=TextGenerationUnavailableError("timeout")
    )
    
    response = client.post(f"/stores/{store.id}/sales-summary", headers=auth_headers)
    
    assert response.status_code == 503
    assert response.json()["code"] == "UPSTREAM_UNAVAILABLE"


def test_sales_summary_queries_run_off_the_event_loop(client, store, auth_headers, monkeypatch):
    loops = []
    original = AnalyticsService.get_sales_data
    
    def get_sales_data(self, store_id):
        try:
            loops.append(asyncio.get_running_loop())
        except RuntimeError:
            loops.append(None)
        return original(self, store_id)
    
    monkeypatch.setattr(AnalyticsService, "get_sales_data", get_sales_data)
    
    response = client.post(f"/stores/{store.id}/sales-summary", headers=auth_headers)
    
    assert response.status_code == 200
    assert loops == [None]
