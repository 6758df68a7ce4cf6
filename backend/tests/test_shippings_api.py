"""
Restaurant Ordering API: /api/shippings Tests
================================================
"""

import pytest

SHIPPING = {
    "order_id": 1,
    "receiver_name": "Somchai",
    "shipping_address": "99 Nimman Rd, Chiang Mai",
    "phone": "0812345678",
}


class TestShippings:

    @pytest.mark.asyncio
    async def test_create_defaults_to_pending(self, client, auth_headers):
        created = await client.post("/api/shippings", json=SHIPPING, headers=auth_headers)
        assert created.status_code == 201

        row = (await client.get(f"/api/shippings/{created.json()['id']}", headers=auth_headers)).json()["data"]
        assert row["shipping_status"] == "pending"
        assert row["receiver_name"] == "Somchai"

    @pytest.mark.asyncio
    async def test_missing_phone(self, client, auth_headers):
        response = await client.post(
            "/api/shippings", json={**SHIPPING, "phone": ""}, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Missing required fields"

    @pytest.mark.asyncio
    async def test_status_update(self, client, auth_headers):
        shipping_id = (await client.post("/api/shippings", json=SHIPPING, headers=auth_headers)).json()["id"]
        response = await client.put(
            f"/api/shippings/{shipping_id}", json={"shipping_status": "delivered"}, headers=auth_headers
        )
        assert response.json() == {"status": "ok", "message": "Shipping updated successfully"}

        row = (await client.get(f"/api/shippings/{shipping_id}", headers=auth_headers)).json()["data"]
        assert row["shipping_status"] == "delivered"
        assert row["phone"] == SHIPPING["phone"]

    @pytest.mark.asyncio
    async def test_order_id_is_not_mutable(self, client, auth_headers):
        shipping_id = (await client.post("/api/shippings", json=SHIPPING, headers=auth_headers)).json()["id"]
        response = await client.put(
            f"/api/shippings/{shipping_id}", json={"order_id": 5}, headers=auth_headers
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "column", ["receiver_name", "shipping_address", "phone", "shipping_status"]
    )
    async def test_null_for_required_column_is_bad_request(self, client, auth_headers, column):
        shipping_id = (await client.post("/api/shippings", json=SHIPPING, headers=auth_headers)).json()["id"]
        response = await client.put(
            f"/api/shippings/{shipping_id}", json={column: None}, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["message"] == f"{column} must not be null"

    @pytest.mark.asyncio
    async def test_lenient_list(self, client, auth_headers):
        await client.post("/api/shippings", json=SHIPPING, headers=auth_headers)
        body = (await client.get("/api/shippings?limit=nope", headers=auth_headers)).json()
        assert body["count"] == 1
        assert "total" not in body
