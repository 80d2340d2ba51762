"""Integration tests: Payment endpoints."""

import pytest
from httpx import AsyncClient

from app.models.enums import FeeStatus


@pytest.mark.asyncio
async def test_payment_settles_fee(async_client: AsyncClient, api_base: str, make_client, make_fee):
    client = await make_client()
    fee = await make_fee(client.id, "100.00")
    await make_fee(client.id, "50.00", status=FeeStatus.PAID)

    resp = await async_client.post(
        f"{api_base}/payments",
        json={"fee_id": fee.id, "amount": "100.00", "method": "Credit Card", "reference": "CC-1"},
    )

    assert resp.status_code == 200, resp.text
    payment = resp.json()["data"]
    assert payment["method"] == "Credit Card"

    resp = await async_client.get(f"{api_base}/fees/{fee.id}")
    assert resp.json()["data"]["status"] == "paid"
    resp = await async_client.get(f"{api_base}/clients/{client.id}")
    totals = resp.json()["data"]
    assert (totals["total_due"], totals["total_paid"]) == ("0.00", "150.00")

    resp = await async_client.delete(f"{api_base}/payments/{payment['id']}")
    assert resp.status_code == 200
    resp = await async_client.get(f"{api_base}/fees/{fee.id}", params={"as_of": "2026-03-01"})
    assert resp.json()["data"]["status"] == "pending"


@pytest.mark.asyncio
async def test_second_payment_is_conflict(async_client: AsyncClient, api_base: str, make_client, make_fee):
    client = await make_client()
    fee = await make_fee(client.id, status=FeeStatus.PAID)

    resp = await async_client.post(f"{api_base}/payments", json={"fee_id": fee.id, "amount": "100.00"})

    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "conflict"


@pytest.mark.asyncio
async def test_payment_for_unknown_fee(async_client: AsyncClient, api_base: str):
    resp = await async_client.post(f"{api_base}/payments", json={"fee_id": 55, "amount": "1.00"})

    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_list_payments_by_fee(async_client: AsyncClient, api_base: str, make_payment):
    first = await make_payment(1)
    await make_payment(2)

    resp = await async_client.get(f"{api_base}/payments", params={"fee_id": 1})

    assert [p["id"] for p in resp.json()["data"]] == [first.id]
