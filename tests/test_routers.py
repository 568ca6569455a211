# =============================================================================
# tests/test_routers.py - HTTP Endpoint Tests
# =============================================================================
# This module contains tests for:
# - Router wiring under /api/v1
# - Bearer token verification (HS256 Supabase tokens)
# - Error bodies for validation, auth and upstream failures
# - Multipart crop uploads without a session
#
# Services run against the in-memory Supabase double and the marketplace
# stub; auth is either overridden or a real signed token.
# =============================================================================

import time

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.auth.dependencies import get_current_user, get_current_user_optional
from app.dependencies import get_preferences_store
from app.main import app
from core.services.preferences_service import PreferencesStore
from tests.conftest import FakeStorageError


def make_token(sub: str, secret: str = "test-jwt-secret", expires_in: int = 3600) -> str:
    return jwt.encode(
        {
            "sub": sub,
            "aud": "authenticated",
            "email": "admin@example.com",
            "role": "authenticated",
            "exp": int(time.time()) + expires_in,
        },
        secret,
        algorithm="HS256",
    )


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def signed_in(auth_user):
    app.dependency_overrides[get_current_user] = lambda: auth_user
    app.dependency_overrides[get_current_user_optional] = lambda: auth_user
    return auth_user


def address_payload(**overrides):
    data = {
        "user_id": "user-1",
        "full_name": "Awa Jallow",
        "address_line1": "Kairaba Avenue",
        "city": "Serekunda",
        "state": "KMC",
        "postal_code": "00000",
        "country": "Gambia",
        "phone_number": "+2207000000",
    }
    data.update(overrides)
    return data


# =============================================================================
# Root / Health
# =============================================================================

class TestRootAndHealth:

    def test_root(self, client):
        body = client.get("/").json()

        assert body["name"] == "AgriDash Admin API"
        assert body["health"] == "/api/v1/health"

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness(self, client, fake_supabase, marketplace):
        marketplace.add("GET", "categories/", [])

        body = client.get("/api/v1/health/ready").json()

        assert body["status"] == "ready"
        assert body["checks"]["database"] == "healthy"

    def test_readiness_degraded(self, client, fake_supabase, marketplace):
        body = client.get("/api/v1/health/ready").json()

        assert body["status"] == "degraded"
        assert body["checks"]["marketplace_api"].startswith("unhealthy")


# =============================================================================
# Auth
# =============================================================================

class TestAuth:

    def test_me_with_valid_token(self, client):
        sub = "11111111-2222-3333-4444-555555555555"

        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {make_token(sub)}"})

        assert response.status_code == 200
        assert response.json() == {"id": sub, "email": "admin@example.com", "role": "authenticated"}

    def test_wrong_secret(self, client):
        token = make_token("11111111-2222-3333-4444-555555555555", secret="other")

        response = client.get("/api/v1/auth/verify", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_expired(self, client):
        token = make_token("11111111-2222-3333-4444-555555555555", expires_in=-60)

        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"

    def test_missing_token(self, client, fake_supabase):
        response = client.post("/api/v1/addresses", json=address_payload())

        assert response.status_code in (401, 403)
        assert fake_supabase.rows("addresses") == []


# =============================================================================
# Crops
# =============================================================================

class TestCropEndpoints:

    def test_create_without_session_skips_image(self, client, fake_supabase):
        response = client.post(
            "/api/v1/crops",
            data={"name": "Maize", "category": "grains"},
            files={"image": ("maize.png", b"\x89PNG", "image/png")},
        )

        assert response.status_code == 201
        assert response.json()["image_url"] is None
        assert fake_supabase.storage.objects == {}

    def test_create_with_session_uploads(self, client, fake_supabase, signed_in):
        response = client.post(
            "/api/v1/crops",
            data={"name": "Maize", "category": "grains"},
            files={"image": ("maize.png", b"\x89PNG", "image/png")},
        )

        assert response.status_code == 201
        assert f"/crop_images/{signed_in.user_id}/" in response.json()["image_url"]

    def test_validation_error_body(self, client, fake_supabase):
        response = client.post("/api/v1/crops", data={"name": "", "category": "grains"})

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["details"]["fields"] == {"name": "Crop name is required"}

    def test_unexpected_upload_error(self, client, fake_supabase, signed_in):
        fake_supabase.storage.upload_error = FakeStorageError("connection reset", status=500)

        response = client.post(
            "/api/v1/crops",
            data={"name": "Maize", "category": "grains"},
            files={"image": ("maize.png", b"\x89PNG", "image/png")},
        )

        assert response.status_code == 502
        assert response.json()["code"] == "STORAGE_UPLOAD_ERROR"
        assert fake_supabase.rows("crops") == []

    def test_insert_not_confirmed(self, client, fake_supabase):
        fake_supabase.return_nothing_on_insert("crops")

        response = client.post("/api/v1/crops", data={"name": "Maize", "category": "grains"})

        assert response.status_code == 502
        assert response.json()["code"] == "RECORD_NOT_WRITTEN"

    def test_list_and_delete(self, client, fake_supabase):
        [row] = fake_supabase.seed("crops", {"name": "Rice", "category": "grains", "image_url": "crop_images/u/r.png"})

        crops = client.get("/api/v1/crops").json()
        assert crops[0]["image_url"].endswith("/storage/v1/object/public/crop_images/u/r.png")

        response = client.delete(f"/api/v1/crops/{row['id']}")
        assert response.json()["image_removed"] is False
        assert client.get(f"/api/v1/crops/{row['id']}").status_code == 404

    def test_categories(self, client):
        assert "grains" in client.get("/api/v1/crops/categories").json()


# =============================================================================
# Addresses / Products / Orders
# =============================================================================

class TestSupabaseEndpoints:

    def test_address_flow(self, client, fake_supabase, signed_in):
        a = client.post("/api/v1/addresses", json=address_payload(full_name="A")).json()
        b = client.post("/api/v1/addresses", json=address_payload(full_name="B", is_default=True)).json()

        assert a["is_default"] is True
        assert b["is_default"] is True

        deleted = client.delete(f"/api/v1/addresses/{b['id']}").json()
        assert deleted["promoted"]["id"] == a["id"]

        default = client.get("/api/v1/addresses/default", params={"user_id": "user-1"}).json()
        assert default["id"] == a["id"]

    def test_address_owner_defaults_to_caller(self, client, fake_supabase, signed_in):
        payload = address_payload()
        del payload["user_id"]

        created = client.post("/api/v1/addresses", json=payload).json()
        client.post("/api/v1/addresses", json=address_payload(user_id="customer-9"))

        assert created["user_id"] == signed_in.user_id
        own = client.get("/api/v1/addresses").json()
        assert [row["id"] for row in own] == [created["id"]]
        assert client.get("/api/v1/addresses/default").json()["id"] == created["id"]

    def test_address_validation(self, client, fake_supabase, signed_in):
        response = client.post("/api/v1/addresses", json=address_payload(phone_number=""))

        assert response.status_code == 422
        assert response.json()["details"]["fields"] == {"phone_number": "Phone number is required"}

    def test_product_status_requires_valid_value(self, client, fake_supabase, signed_in):
        response = client.patch("/api/v1/products/p-1/status", json={"status": "sold"})

        assert response.status_code == 422
        assert response.json()["details"]["fields"] == {
            "status": "Status must be active, out_of_stock or deleted"
        }

    def test_product_not_owner(self, client, fake_supabase, signed_in):
        [row] = fake_supabase.seed("products", {
            "name": "Okra", "price": 5, "status": "active", "seller_id": "someone-else",
        })

        response = client.delete(f"/api/v1/products/{row['id']}")

        assert response.status_code == 403
        assert response.json()["code"] == "NOT_OWNER"

    def test_order_status(self, client, fake_supabase, signed_in):
        [row] = fake_supabase.seed("orders", {
            "order_id": "ORD-1-1", "user_id": "buyer-1", "total_amount": 10, "currency": "GMD",
            "payment_method": "cash", "payment_status": "pending", "delivery_status": "processing",
        })

        response = client.patch(f"/api/v1/orders/{row['id']}/delivery-status", json={"delivery_status": "shipped"})

        assert response.status_code == 200
        assert response.json()["delivery_status"] == "shipped"


# =============================================================================
# Marketplace API Endpoints
# =============================================================================

class TestMarketplaceEndpoints:

    def test_market_price_listing(self, client, marketplace):
        marketplace.add("GET", "farming/market-prices/", {"results": [
            {"id": 1, "crop_name": "Maize", "location": "Brikama", "price": "20", "trend": "up"},
            {"id": 2, "crop_name": "Rice", "location": "Brikama", "price": "40", "trend": "down"},
        ]})

        body = client.get("/api/v1/market-prices", params={"search": "mai"}).json()

        assert [row["id"] for row in body["results"]] == [1]
        assert body["summary"]["overall_trend"] == "up"

    def test_upstream_error(self, client, marketplace):
        marketplace.add("GET", "categories/", {"detail": "boom"}, status=500)

        response = client.get("/api/v1/categories")

        assert response.status_code == 502
        body = response.json()
        assert body["code"] == "EXTERNAL_API_ERROR"
        assert body["details"]["upstream_status"] == 500

    def test_audit_logs_need_session(self, client, marketplace):
        response = client.get("/api/v1/audit-logs")

        assert response.status_code in (401, 403)
        assert marketplace.requests == []


# =============================================================================
# Preferences
# =============================================================================

class TestPreferenceEndpoints:

    @pytest.fixture
    def store(self, tmp_path):
        store = PreferencesStore(tmp_path / "settings.json")
        app.dependency_overrides[get_preferences_store] = lambda: store
        return store

    def test_get_defaults(self, client, store):
        assert client.get("/api/v1/preferences").json() == {
            "dark_mode": False,
            "email_notifications": True,
        }

    def test_set_one(self, client, store):
        response = client.put("/api/v1/preferences/dark_mode", json={"value": True})

        assert response.json()["dark_mode"] is True
        assert store.load().dark_mode is True

    def test_patch(self, client, store):
        response = client.patch("/api/v1/preferences", json={"email_notifications": False})

        assert response.json()["email_notifications"] is False

    def test_set_wrong_type(self, client, store):
        response = client.put("/api/v1/preferences/dark_mode", json={"value": "banana"})

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["details"]["fields"] == {"dark_mode": "Dark mode must be true or false"}
        assert store.load().dark_mode is False

    def test_set_unknown_key(self, client, store):
        response = client.put("/api/v1/preferences/favourite_colour", json={"value": "green"})

        assert response.status_code == 422
        assert "favourite_colour" in response.json()["details"]["fields"]
        assert not store.path.exists()
