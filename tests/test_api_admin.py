from decimal import Decimal

import pytest

CUSTOMER = {"name": "Omar Saeed", "email": "omar@example.com", "phone": "0501234567"}


async def submit(client, price=100):
    body = {"items": [{"id": "1", "name": "Brake Disc", "price": price, "quantity": 1}], "customer": CUSTOMER}
    return (await client.post("/quotations", json=body)).json()["data"]


# --------------------------
# Auth gate
# --------------------------
@pytest.mark.parametrize("path", ["/admin/products", "/admin/new-arrivals", "/admin/quotations", "/admin/stats"])
async def test_admin_routes_require_a_token(client, path):
    response = await client.get(path)
    assert response.status_code == 401


@pytest.mark.parametrize("path", ["/admin/products", "/admin/quotations", "/admin/enquiries"])
async def test_admin_routes_reject_non_admins(client, customer_headers, path):
    response = await client.get(path, headers=customer_headers)

    assert response.status_code == 403
    assert response.json()["detail"] == "Access denied"


# --------------------------
# Products
# --------------------------
async def test_product_crud(client, admin_headers, lookups):
    created = await client.post(
        "/admin/products",
        json={"name": "Brake Disc", "price": "80.00", "brand_id": lookups["BMW"], "category_id": lookups["Brakes"]},
        headers=admin_headers,
    )
    assert created.status_code == 201
    product = created.json()["data"]
    assert product["brand_name"] == "BMW"
    assert product["category_name"] == "Brakes"
    assert product["in_stock"] is True

    updated = await client.put(
        f"/admin/products/{product['id']}",
        json={"price": "75.50", "in_stock": False},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert Decimal(str(updated.json()["data"]["price"])) == Decimal("75.50")
    assert updated.json()["data"]["in_stock"] is False

    panel = (await client.get("/admin/products", headers=admin_headers)).json()
    assert [p["name"] for p in panel["data"]] == ["Brake Disc"]
    assert {b["name"] for b in panel["brands"]} == {"BMW", "Audi"}
    assert {c["name"] for c in panel["categories"]} == {"Brakes", "Engine"}

    deleted = await client.delete(f"/admin/products/{product['id']}", headers=admin_headers)
    assert deleted.status_code == 200
    missing = await client.get(f"/admin/products/{product['id']}", headers=admin_headers)
    assert missing.status_code == 404


@pytest.mark.parametrize(
    "body",
    [
        {"name": "Brake Disc", "price": "not a number"},
        {"name": "Brake Disc", "price": -1},
        {"name": "", "price": 10},
        {"name": "Brake Disc", "price": 10, "stock_quantity": -5},
    ],
)
async def test_product_input_is_typed(client, admin_headers, body):
    response = await client.post("/admin/products", json=body, headers=admin_headers)
    assert response.status_code == 422


async def test_product_with_unknown_brand_is_rejected(client, admin_headers):
    response = await client.post(
        "/admin/products", json={"name": "Brake Disc", "price": 10, "brand_id": 999}, headers=admin_headers
    )
    assert response.status_code == 404


async def test_changes_are_recorded_in_activity_log(client, admin_headers):
    await client.post("/admin/products", json={"name": "Oil Filter", "price": 12}, headers=admin_headers)

    activities = (await client.get("/admin/activities", headers=admin_headers)).json()
    assert activities["total"] == 1
    assert "Oil Filter" in activities["data"][0]["message"]


# --------------------------
# New arrivals
# --------------------------
async def test_new_arrival_discount_is_derived_from_prices(client, admin_headers):
    product = (
        await client.post("/admin/products", json={"name": "Headlight", "price": 300}, headers=admin_headers)
    ).json()["data"]

    created = await client.post(
        "/admin/new-arrivals",
        json={"product_id": product["id"], "original_price": 300, "sale_price": 250, "is_featured": True, "rating": 4.5},
        headers=admin_headers,
    )
    assert created.status_code == 201
    arrival = created.json()["data"]
    assert arrival["discount_percentage"] == 17
    assert arrival["product_name"] == "Headlight"

    updated = await client.put(
        f"/admin/new-arrivals/{arrival['id']}", json={"sale_price": 150}, headers=admin_headers
    )
    assert updated.json()["data"]["discount_percentage"] == 50

    featured = (await client.get("/catalog/new-arrivals", params={"featured": True})).json()
    assert [a["id"] for a in featured["data"]] == [arrival["id"]]

    panel = (await client.get("/admin/new-arrivals", headers=admin_headers)).json()
    assert [p["name"] for p in panel["products"]] == ["Headlight"]


async def test_new_arrival_rating_out_of_range(client, admin_headers):
    product = (
        await client.post("/admin/products", json={"name": "Headlight", "price": 300}, headers=admin_headers)
    ).json()["data"]

    response = await client.post(
        "/admin/new-arrivals", json={"product_id": product["id"], "rating": 6}, headers=admin_headers
    )
    assert response.status_code == 422


async def test_deleting_product_removes_its_new_arrivals(client, admin_headers):
    product = (
        await client.post("/admin/products", json={"name": "Headlight", "price": 300}, headers=admin_headers)
    ).json()["data"]
    await client.post("/admin/new-arrivals", json={"product_id": product["id"]}, headers=admin_headers)

    await client.delete(f"/admin/products/{product['id']}", headers=admin_headers)

    panel = (await client.get("/admin/new-arrivals", headers=admin_headers)).json()
    assert panel["data"] == []


# --------------------------
# Quotations
# --------------------------
async def test_quotation_listing_and_status_changes(client, admin_headers):
    first = await submit(client)
    second = await submit(client, price=40)

    listing = (await client.get("/admin/quotations", headers=admin_headers)).json()
    assert listing["total"] == 2

    approved = await client.put(
        f"/admin/quotations/{first['id']}/status", json={"status": "approved"}, headers=admin_headers
    )
    assert approved.status_code == 200
    assert approved.json()["data"]["status"] == "approved"

    pending = (await client.get("/admin/quotations", params={"status": "pending"}, headers=admin_headers)).json()
    assert [q["id"] for q in pending["data"]] == [second["id"]]

    back = await client.put(
        f"/admin/quotations/{first['id']}/status", json={"status": "pending"}, headers=admin_headers
    )
    assert back.status_code == 400

    stats = (await client.get("/admin/stats", headers=admin_headers)).json()
    assert stats["total_quotations"] == 2
    assert stats["pending_quotations"] == 1


async def test_unknown_status_filter_is_rejected(client, admin_headers):
    response = await client.get("/admin/quotations", params={"status": "archived"}, headers=admin_headers)
    assert response.status_code == 400


async def test_unknown_status_value_is_rejected(client, admin_headers):
    quotation = await submit(client)
    response = await client.put(
        f"/admin/quotations/{quotation['id']}/status", json={"status": "shipped"}, headers=admin_headers
    )
    assert response.status_code == 422


async def test_quotation_pdf(client, admin_headers):
    quotation = await submit(client)

    response = await client.get(f"/admin/quotations/{quotation['id']}/pdf", headers=admin_headers)

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")
    assert quotation["quotation_number"] in response.headers["content-disposition"]


async def test_missing_quotation_is_404(client, admin_headers):
    response = await client.get("/admin/quotations/999", headers=admin_headers)
    assert response.status_code == 404


async def test_activity_log_can_be_searched(client, admin_headers):
    await client.post("/admin/products", json={"name": "Oil Filter", "price": 12}, headers=admin_headers)
    await client.post("/admin/products", json={"name": "Wiper Blade", "price": 8}, headers=admin_headers)

    found = (await client.get("/admin/activities", params={"search": "wiper"}, headers=admin_headers)).json()
    assert found["total"] == 1
    assert "Wiper Blade" in found["data"][0]["message"]
    assert found["filters"]["search"] == "wiper"
    assert found["page"] == 1
