"""
Restaurant Ordering API: /api/payments Tests
===============================================

What:  Enum validation, derived paid_at and the strict pagination family.
"""

import pytest


async def pay(client, headers, **fields):
    body = {"order_id": 1, "payment_method": "cash", "amount": 120, **fields}
    return await client.post("/api/payments", json=body, headers=headers)


async def fetch(client, headers, payment_id):
    return (await client.get(f"/api/payments/{payment_id}", headers=headers)).json()["data"]


class TestPaymentCreate:

    @pytest.mark.asyncio
    async def test_defaults_to_unpaid(self, client, auth_headers):
        payment_id = (await pay(client, auth_headers)).json()["id"]
        row = await fetch(client, auth_headers, payment_id)
        assert row["payment_status"] == "unpaid"
        assert row["paid_at"] is None

    @pytest.mark.asyncio
    async def test_paid_sets_paid_at(self, client, auth_headers):
        payment_id = (await pay(client, auth_headers, payment_status="paid")).json()["id"]
        row = await fetch(client, auth_headers, payment_id)
        assert row["paid_at"] is not None

    @pytest.mark.asyncio
    async def test_invalid_method(self, client, auth_headers):
        response = await pay(client, auth_headers, payment_method="bitcoin")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid payment_method"

    @pytest.mark.asyncio
    async def test_invalid_status(self, client, auth_headers):
        response = await pay(client, auth_headers, payment_status="refunded")
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid payment_status"

    @pytest.mark.asyncio
    async def test_missing_amount(self, client, auth_headers):
        response = await pay(client, auth_headers, amount=None)
        assert response.status_code == 400
        assert response.json()["message"] == "Missing required fields"


class TestPaymentUpdate:

    @pytest.mark.asyncio
    async def test_paid_then_unpaid(self, client, auth_headers):
        payment_id = (await pay(client, auth_headers)).json()["id"]

        await client.put(f"/api/payments/{payment_id}", json={"payment_status": "paid"}, headers=auth_headers)
        assert (await fetch(client, auth_headers, payment_id))["paid_at"] is not None

        await client.put(f"/api/payments/{payment_id}", json={"payment_status": "unpaid"}, headers=auth_headers)
        assert (await fetch(client, auth_headers, payment_id))["paid_at"] is None

    @pytest.mark.asyncio
    async def test_amount_only_keeps_paid_at(self, client, auth_headers):
        payment_id = (await pay(client, auth_headers, payment_status="paid")).json()["id"]
        paid_at = (await fetch(client, auth_headers, payment_id))["paid_at"]

        await client.put(f"/api/payments/{payment_id}", json={"amount": 99.5}, headers=auth_headers)
        row = await fetch(client, auth_headers, payment_id)
        assert row["amount"] == 99.5
        assert row["paid_at"] == paid_at

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, -5, None])
    async def test_amount_must_be_positive(self, client, auth_headers, amount):
        payment_id = (await pay(client, auth_headers)).json()["id"]
        response = await client.put(
            f"/api/payments/{payment_id}", json={"amount": amount}, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["message"] == "amount must be a positive number"

    @pytest.mark.asyncio
    async def test_invalid_method_on_update(self, client, auth_headers):
        payment_id = (await pay(client, auth_headers)).json()["id"]
        response = await client.put(
            f"/api/payments/{payment_id}", json={"payment_method": "card"}, headers=auth_headers
        )
        assert response.status_code == 400


class TestPaymentList:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", ["abc", "0", "-1"])
    async def test_bad_limit_is_rejected(self, client, auth_headers, limit):
        response = await client.get(f"/api/payments?limit={limit}", headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"status": "bad_request", "message": "limit must be a positive number"}

    @pytest.mark.asyncio
    async def test_bad_page_falls_back_to_first(self, client, auth_headers):
        for _ in range(2):
            await pay(client, auth_headers)
        body = (await client.get("/api/payments?limit=1&page=zero", headers=auth_headers)).json()
        assert body["page"] == 1
        assert body["total"] == 2
        assert body["count"] == 1

    @pytest.mark.asyncio
    async def test_no_limit_returns_all(self, client, auth_headers):
        for _ in range(3):
            await pay(client, auth_headers)
        body = (await client.get("/api/payments", headers=auth_headers)).json()
        assert body["count"] == 3
        assert "limit" not in body
