"""
API tests for the catalog entity families
"""

import pytest
from sqlalchemy.exc import OperationalError

from app.storage import DatabaseStorage

ENTITY_SAMPLES = [
    ("/api/categories", {"nameAr": "إلكترونيات", "nameEn": "Electronics", "order": 1}),
    ("/api/products", {
        "nameAr": "هاتف",
        "nameEn": "Phone",
        "descriptionAr": "هاتف ذكي",
        "descriptionEn": "Smartphone",
        "categoryId": 3,
        "imageUrl": "/uploads/phone.png",
        "videoUrl": "/uploads/phone.mp4",
        "featuresAr": ["شاشة", "كاميرا"],
        "featuresEn": ["Screen", "Camera"],
        "order": 2,
        "isActive": True,
    }),
    ("/api/banners", {"imageUrl": "/uploads/banner.png", "linkUrl": "https://example.com", "order": 0, "isActive": False}),
    ("/api/payment-methods", {"imageUrl": "/uploads/visa.png", "nameAr": "فيزا", "nameEn": "Visa", "order": 0}),
    ("/api/telegram-channels", {
        "imageUrl": "/uploads/tg.png",
        "linkUrl": "https://t.me/shop",
        "nameAr": "قناة",
        "nameEn": "Channel",
        "order": 4,
    }),
]


@pytest.mark.parametrize("path,body", ENTITY_SAMPLES)
def test_create_then_fetch_returns_same_fields(admin_client, client, path, body):
    resp = admin_client.post(path, json=body)
    assert resp.status_code == 201, resp.text
    created = resp.json()
    assert isinstance(created["id"], int)

    fetched = client.get(f"{path}/{created['id']}")
    assert fetched.status_code == 200
    for key, value in body.items():
        assert fetched.json()[key] == value


@pytest.mark.parametrize("path,body", ENTITY_SAMPLES)
def test_mutations_require_admin(client, path, body):
    assert client.post(path, json=body).status_code == 401
    # Payload validity does not matter
    assert client.post(path, json={}).status_code == 401
    assert client.patch(f"{path}/1", json={"order": 1}).status_code == 401
    assert client.delete(f"{path}/1").status_code == 401


@pytest.mark.parametrize("path,body", ENTITY_SAMPLES)
def test_delete_then_fetch_is_not_found(admin_client, client, path, body):
    created = admin_client.post(path, json=body).json()

    assert admin_client.delete(f"{path}/{created['id']}").status_code == 204
    assert client.get(f"{path}/{created['id']}").status_code == 404
    assert admin_client.delete(f"{path}/{created['id']}").status_code == 404


@pytest.mark.parametrize("path,body", ENTITY_SAMPLES)
def test_patch_unknown_id_is_not_found(admin_client, path, body):
    resp = admin_client.patch(f"{path}/9999", json={"order": 3})
    assert resp.status_code == 404
    assert "not found" in resp.json()["error"]


def test_create_reports_field_errors(admin_client):
    resp = admin_client.post("/api/categories", json={"nameEn": "No Arabic"})
    assert resp.status_code == 400
    errors = resp.json()["error"]
    assert errors[0]["path"] == ["nameAr"]
    assert errors[0]["code"] == "missing"
    assert errors[0]["message"]


def test_telegram_channel_requires_link(admin_client):
    resp = admin_client.post("/api/telegram-channels", json={"imageUrl": "/uploads/tg.png"})
    assert resp.status_code == 400
    assert ["linkUrl"] in [e["path"] for e in resp.json()["error"]]


def test_partial_update_keeps_omitted_fields(admin_client):
    product = admin_client.post("/api/products", json=ENTITY_SAMPLES[1][1]).json()

    resp = admin_client.patch(f"/api/products/{product['id']}", json={"nameEn": "Mobile"})
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["nameEn"] == "Mobile"
    assert updated["nameAr"] == product["nameAr"]
    assert updated["featuresEn"] == product["featuresEn"]
    assert updated["order"] == product["order"]


def test_patch_cannot_null_required_field(admin_client):
    category = admin_client.post("/api/categories", json={"nameAr": "ملابس"}).json()
    resp = admin_client.patch(f"/api/categories/{category['id']}", json={"nameAr": None})
    assert resp.status_code == 400
    assert admin_client.get(f"/api/categories/{category['id']}").json()["nameAr"] == "ملابس"


def test_patch_can_clear_optional_field(admin_client):
    category = admin_client.post("/api/categories", json={"nameAr": "ملابس", "nameEn": "Clothing"}).json()
    resp = admin_client.patch(f"/api/categories/{category['id']}", json={"nameEn": None})
    assert resp.status_code == 200
    assert resp.json()["nameEn"] is None


def test_list_sorted_by_order_with_stable_ties(admin_client, client):
    ids = []
    for name, order in [("أ", 2), ("ب", 1), ("ج", 2), ("د", 0)]:
        ids.append(admin_client.post("/api/products", json={"nameAr": name, "order": order}).json()["id"])

    listed = [p["id"] for p in client.get("/api/products").json()]
    assert listed == [ids[3], ids[1], ids[0], ids[2]]


def test_end_to_end_inactive_product_stays_in_admin_listing(admin_client, client):
    category = admin_client.post("/api/categories", json={"nameAr": "إلكترونيات"}).json()
    product = admin_client.post(
        "/api/products", json={"nameAr": "هاتف", "categoryId": category["id"], "isActive": True}
    ).json()

    listed = client.get("/api/products").json()
    assert [(p["id"], p["categoryId"]) for p in listed] == [(product["id"], category["id"])]

    resp = admin_client.patch(f"/api/products/{product['id']}", json={"isActive": False})
    assert resp.json()["isActive"] is False

    assert product["id"] in [p["id"] for p in client.get("/api/products").json()]
    home = client.get("/api/storefront/home").json()
    assert home["products"] == []


def test_store_failure_returns_generic_error(client, monkeypatch):
    def boom(self):
        raise OperationalError("SELECT 1", {}, Exception("database is down"))

    monkeypatch.setattr(DatabaseStorage, "get_products", boom)
    resp = client.get("/api/products")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


@pytest.mark.parametrize("path,body", ENTITY_SAMPLES)
def test_non_integer_id_is_not_found(admin_client, client, path, body):
    assert client.get(f"{path}/abc").status_code == 404
    assert admin_client.patch(f"{path}/abc", json={"order": 1}).status_code == 404
    assert admin_client.delete(f"{path}/1.5").status_code == 404


def test_null_order_and_active_take_defaults(admin_client):
    category = admin_client.post("/api/categories", json={"nameAr": "ملابس", "order": None})
    assert category.status_code == 201
    assert category.json()["order"] == 0

    product = admin_client.post("/api/products", json={"nameAr": "قميص", "order": None, "isActive": None})
    assert product.status_code == 201
    assert product.json()["order"] == 0
    assert product.json()["isActive"] is True


def test_null_required_field_still_rejected_on_create(admin_client):
    resp = admin_client.post("/api/banners", json={"imageUrl": None})
    assert resp.status_code == 400
    assert resp.json()["error"][0]["path"] == ["imageUrl"]
