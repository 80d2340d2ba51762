"""Integration tests: Invoice and dashboard endpoints."""

import pytest
from httpx import AsyncClient

from app.models.enums import FeeStatus


@pytest.mark.asyncio
async def test_invoice_listing(async_client: AsyncClient, api_base: str, make_client, make_fee):
    client = await make_client("Globex Inc")
    fee = await make_fee(client.id, "300.00", description="Quarterly support")

    resp = await async_client.get(f"{api_base}/invoices", params={"as_of": "2026-05-01"})

    assert resp.status_code == 200
    invoice = resp.json()["data"][0]
    assert invoice["invoice_number"] == f"INV-{fee.id:04d}"
    assert invoice["client_name"] == "Globex Inc"
    assert invoice["status"] == "overdue"

    resp = await async_client.get(f"{api_base}/invoices/{fee.id}")
    assert resp.json()["data"]["amount"] == "300.00"

    resp = await async_client.get(f"{api_base}/invoices/9999")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_dashboard(async_client: AsyncClient, api_base: str, make_client, make_fee, make_payment):
    client = await make_client()
    await make_fee(client.id, "80.00")
    paid = await make_fee(client.id, "20.00", status=FeeStatus.PAID)
    await make_payment(paid.id, "20.00")

    resp = await async_client.get(f"{api_base}/dashboard", params={"as_of": "2026-03-15"})

    assert resp.status_code == 200
    summary = resp.json()["data"]
    assert summary["total_collected"] == "20.00"
    assert summary["total_pending"] == "80.00"
    assert summary["total_overdue"] == "0.00"
    assert summary["total_clients"] == 1
    assert summary["pending_actions"][0]["title"] == "1 Pending Fee"
    assert summary["recent_activity"][0]["type"] == "payment"
