import uuid
from decimal import Decimal

from storefront.routers.cart_router import CART_ID_HEADER

CUSTOMER = {"name": "Omar Saeed", "email": "omar@example.com", "phone": "0501234567"}


async def test_new_cart_gets_an_id(client):
    response = await client.get("/cart")

    assert response.status_code == 200
    cart_id = response.headers[CART_ID_HEADER]
    uuid.UUID(cart_id)
    assert response.json() == {"cart_id": cart_id, "items": [], "total": 0, "items_count": 0}


async def test_invalid_cart_id_is_rejected(client):
    response = await client.get("/cart", headers={CART_ID_HEADER: "../../etc/passwd"})
    assert response.status_code == 400


async def test_cart_persists_between_requests(client):
    first = await client.post("/cart/items", json={"id": 1, "name": "Brake Disc", "price": 80})
    headers = {CART_ID_HEADER: first.headers[CART_ID_HEADER]}

    await client.post("/cart/items", json={"id": 1, "name": "Brake Disc", "price": 80}, headers=headers)
    await client.post("/cart/items", json={"id": 2, "name": "Oil Filter", "price": 12.5}, headers=headers)
    cart = (await client.get("/cart", headers=headers)).json()

    assert [(i["id"], i["quantity"]) for i in cart["items"]] == [("1", 2), ("2", 1)]
    assert cart["total"] == 172.5
    assert cart["items_count"] == 3


async def test_quantity_update_and_removal(client):
    first = await client.post("/cart/items", json={"id": "a", "name": "Wiper", "price": 10})
    headers = {CART_ID_HEADER: first.headers[CART_ID_HEADER]}

    cart = (await client.put("/cart/items/a", json={"quantity": 4}, headers=headers)).json()
    assert cart["items_count"] == 4

    cart = (await client.put("/cart/items/a", json={"quantity": 0}, headers=headers)).json()
    assert cart["items"] == []

    await client.post("/cart/items", json={"id": "a", "name": "Wiper", "price": 10}, headers=headers)
    cart = (await client.delete("/cart/items/a", headers=headers)).json()
    assert cart["items"] == []


async def test_checkout_submits_quotation_and_clears_cart(client):
    first = await client.post("/cart/items", json={"id": 1, "name": "Brake Disc", "price": 100})
    headers = {CART_ID_HEADER: first.headers[CART_ID_HEADER]}

    response = await client.post("/cart/checkout", json=CUSTOMER, headers=headers)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "pending"
    assert Decimal(str(data["final_amount"])) == Decimal("105.00")

    cart = (await client.get("/cart", headers=headers)).json()
    assert cart["items"] == []


async def test_failed_checkout_keeps_cart(client):
    first = await client.post("/cart/items", json={"id": 1, "name": "Brake Disc", "price": 100})
    headers = {CART_ID_HEADER: first.headers[CART_ID_HEADER]}

    response = await client.post("/cart/checkout", json={**CUSTOMER, "phone": "123"}, headers=headers)

    assert response.status_code == 400
    assert response.json()["detail"]["field"] == "phone"
    cart = (await client.get("/cart", headers=headers)).json()
    assert cart["items_count"] == 1


async def test_checkout_of_empty_cart_is_rejected(client):
    response = await client.post("/cart/checkout", json=CUSTOMER)

    assert response.status_code == 400
    assert response.json()["detail"]["field"] == "cart"


async def test_client_held_cart_can_be_submitted_directly(client):
    body = {
        "items": [{"id": "9", "name": "Timing Belt", "price": 45.5, "quantity": 2}],
        "customer": {**CUSTOMER, "company": "Fleet LLC", "notes": "Deliver to workshop"},
    }
    response = await client.post("/quotations", json=body)

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["customer_company"] == "Fleet LLC"
    assert Decimal(str(data["total_amount"])) == Decimal("91.00")
    assert Decimal(str(data["tax_amount"])) == Decimal("4.55")
    assert data["quotation_number"] in response.json()["message"]


async def test_submitted_lines_need_a_positive_quantity(client):
    body = {
        "items": [{"id": "1", "name": "Brake Disc", "price": 100, "quantity": -3}],
        "customer": CUSTOMER,
    }
    response = await client.post("/quotations", json=body)

    assert response.status_code == 422
    body["items"][0]["quantity"] = 0
    assert (await client.post("/quotations", json=body)).status_code == 422


async def test_submitted_lines_must_have_distinct_ids(client, admin_headers):
    line = {"id": "1", "name": "Brake Disc", "price": 100, "quantity": 1}
    response = await client.post("/quotations", json={"items": [line, {**line, "quantity": 2}], "customer": CUSTOMER})

    assert response.status_code == 400
    assert response.json()["detail"]["field"] == "cart"
    listing = (await client.get("/admin/quotations", headers=admin_headers)).json()
    assert listing["total"] == 0


async def test_checkout_of_oversized_amount_is_a_cart_error(client):
    first = await client.post("/cart/items", json={"id": 1, "name": "Gold Rim", "price": 1e30})
    assert first.status_code == 200
    headers = {CART_ID_HEADER: first.headers[CART_ID_HEADER]}

    response = await client.post("/cart/checkout", json=CUSTOMER, headers=headers)

    assert response.status_code == 400
    assert response.json()["detail"]["field"] == "cart"
    cart = (await client.get("/cart", headers=headers)).json()
    assert cart["items_count"] == 1
