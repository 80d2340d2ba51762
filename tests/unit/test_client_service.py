"""Unit tests for ClientService"""

from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest

from app.core.result import ErrorKind
from app.models.enums import ClientStatus, FeeStatus
from app.schemas.client import ClientCreate, ClientUpdate
from app.services.client_service import ClientService


@pytest.mark.asyncio
async def test_create_client_starts_active_with_zero_totals(store):
    result = await ClientService.create_client(
        store, ClientCreate(name="Initech", email="billing@initech.com")
    )

    assert result.ok
    assert result.value.status == ClientStatus.ACTIVE
    assert result.value.total_due == Decimal("0.00")
    assert result.value.total_paid == Decimal("0.00")


@pytest.mark.asyncio
async def test_create_client_write_failure(store):
    with patch.object(store.clients, "create", new=AsyncMock(return_value=None)):
        result = await ClientService.create_client(store, ClientCreate(name="Initech"))

    assert result.kind == ErrorKind.WRITE_FAILED


@pytest.mark.asyncio
async def test_update_client_fields(store, make_client):
    client = await make_client()

    result = await ClientService.update_client(
        store, client.id, ClientUpdate(company="Acme Holdings", status=ClientStatus.INACTIVE)
    )

    assert result.value.company == "Acme Holdings"
    assert result.value.status == ClientStatus.INACTIVE
    assert result.value.name == client.name


@pytest.mark.asyncio
async def test_empty_update_returns_existing(store, make_client):
    client = await make_client()

    with patch.object(store.clients, "update", new=AsyncMock()) as update:
        result = await ClientService.update_client(store, client.id, ClientUpdate())

    assert result.value == client
    update.assert_not_called()


@pytest.mark.asyncio
async def test_update_missing_client(store):
    result = await ClientService.update_client(store, 404, ClientUpdate(name="Nobody"))

    assert result.kind == ErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_delete_client_keeps_its_fees(store, make_client, make_fee):
    client = await make_client()
    fee = await make_fee(client.id)

    result = await ClientService.delete_client(store, client.id)

    assert result.ok
    assert await store.clients.get_by_id(client.id) is None
    assert await store.fees.get_by_id(fee.id) is not None


@pytest.mark.asyncio
async def test_reconcile_repairs_stale_totals(store, make_client, make_fee):
    client = await make_client(total_due=Decimal("999.00"), total_paid=Decimal("1.00"))
    await make_fee(client.id, "120.00")
    await make_fee(client.id, "80.00", FeeStatus.PAID)

    result = await ClientService.reconcile_client(store, client.id)

    assert result.ok
    assert result.value.total_due == Decimal("120.00")
    assert result.value.total_paid == Decimal("80.00")


@pytest.mark.asyncio
async def test_reconcile_missing_client(store):
    result = await ClientService.reconcile_client(store, 12)

    assert result.kind == ErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_list_clients_filters(store, make_client):
    acme = await make_client("Acme Corp")
    globex = await make_client("Globex Inc", status=ClientStatus.INACTIVE)

    everyone = await ClientService.list_clients(store)
    assert [c.id for c in everyone.value] == [acme.id, globex.id]

    inactive = await ClientService.list_clients(store, status=ClientStatus.INACTIVE)
    assert [c.id for c in inactive.value] == [globex.id]

    by_email = await ClientService.list_clients(store, search="ACME@")
    assert [c.id for c in by_email.value] == [acme.id]


@pytest.mark.asyncio
async def test_list_clients_read_failure(store):
    with patch.object(store.clients, "list", new=AsyncMock(return_value=None)):
        result = await ClientService.list_clients(store)

    assert result.kind == ErrorKind.READ_FAILED


@pytest.mark.asyncio
async def test_update_can_clear_optional_contact_fields(store, make_client):
    client = await make_client(phone="555-0100", company="Acme")

    result = await ClientService.update_client(
        store, client.id, ClientUpdate(email=None, phone=None, name=None)
    )

    assert result.ok
    assert result.value.email is None
    assert result.value.phone is None
    assert result.value.company == "Acme"
    assert result.value.name == client.name
