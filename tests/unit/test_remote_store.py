"""Unit tests for the hosted record-service backend"""

import json
from datetime import date
from decimal import Decimal

import httpx
import pytest

from app.config import Settings
from app.models.enums import FeeStatus
from app.store.remote import build_remote_store


def _settings(**overrides) -> Settings:
    values = {
        "STORE_BACKEND": "remote",
        "RECORD_SERVICE_URL": "https://records.example.test/api/",
        "RECORD_SERVICE_API_KEY": "test-key",
    }
    values.update(overrides)
    return Settings(**values)


class RecordService:
    """Scripted record service: queue responses, inspect requests."""

    def __init__(self):
        self.requests = []
        self.responses = []

    def reply(self, status_code: int = 200, **body):
        self.responses.append(httpx.Response(status_code, json=body))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def service():
    return RecordService()


@pytest.fixture
async def remote(service):
    store = build_remote_store(_settings(), transport=httpx.MockTransport(service.handler))
    yield store
    await store.close()


FEE_ROW = {
    "Id": 9,
    "client_id_c": {"Id": 3, "Name": "Acme Corp"},
    "description_c": "Annual license",
    "amount_c": 1500.0,
    "due_date_c": "2026-04-30",
    "category_c": "License",
    "status_c": "pending",
}


@pytest.mark.asyncio
async def test_list_sends_filters_in_wire_names(remote, service):
    service.reply(success=True, data=[FEE_ROW])

    fees = await remote.fees.list(client_id=3, status=None)

    assert [f.id for f in fees] == [9]
    request = service.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/api/tables/fee_c/fetch"
    assert request.headers["Authorization"] == "Bearer test-key"
    assert service.last_json["where"] == [
        {"FieldName": "client_id_c", "Operator": "EqualTo", "Values": [3]}
    ]
    assert "amount_c" in service.last_json["fields"]


@pytest.mark.asyncio
async def test_get_by_id(remote, service):
    service.reply(success=True, data=FEE_ROW)

    fee = await remote.fees.get_by_id(9)

    assert fee.client_id == 3
    assert fee.amount == Decimal("1500.00")
    assert service.requests[0].url.path == "/api/tables/fee_c/records/9"


@pytest.mark.asyncio
async def test_get_missing_record(remote, service):
    service.reply(404, success=False, message="Record not found")

    assert await remote.clients.get_by_id(5) is None


@pytest.mark.asyncio
async def test_create_wraps_record(remote, service):
    service.reply(success=True, results=[{"success": True, "data": {**FEE_ROW, "Id": 10}}])

    fee = await remote.fees.create({
        "client_id": 3,
        "description": "Annual license",
        "amount": Decimal("1500.00"),
        "due_date": date(2026, 4, 30),
        "status": FeeStatus.PENDING,
    })

    assert fee.id == 10
    record = service.last_json["records"][0]
    assert record["amount_c"] == 1500.0
    assert record["due_date_c"] == "2026-04-30"
    assert record["status_c"] == "pending"


@pytest.mark.asyncio
async def test_update_sends_id_with_fields(remote, service):
    service.reply(success=True, results=[{"success": True, "data": {**FEE_ROW, "status_c": "paid"}}])

    fee = await remote.fees.update(9, {"status": FeeStatus.PAID})

    assert fee.status == FeeStatus.PAID
    assert service.requests[0].method == "PATCH"
    assert service.last_json == {"records": [{"Id": 9, "status_c": "paid"}]}


@pytest.mark.asyncio
async def test_rejected_record_result(remote, service):
    service.reply(success=True, results=[{"success": False, "message": "Invalid value for amount_c"}])

    assert await remote.fees.update(9, {"amount": Decimal("-1.00")}) is None


@pytest.mark.asyncio
async def test_delete(remote, service):
    service.reply(success=True, results=[{"success": True}])
    service.reply(success=True, results=[{"success": False, "message": "Record not found"}])

    assert await remote.payments.delete(4) is True
    assert service.last_json == {"RecordIds": [4]}
    assert await remote.payments.delete(4) is False


@pytest.mark.asyncio
async def test_server_error_is_failure(remote, service):
    service.reply(500, success=False, message="boom")

    assert await remote.clients.list() is None


@pytest.mark.asyncio
async def test_unsuccessful_envelope_is_failure(remote, service):
    service.reply(success=False, message="Table not found")

    assert await remote.clients.list() is None


@pytest.mark.asyncio
async def test_malformed_record_fails_the_read(remote, service):
    service.reply(success=True, data=[FEE_ROW, {"Id": 10, "amount_c": "lots"}])

    assert await remote.fees.list() is None


@pytest.mark.asyncio
async def test_transport_error_is_failure(service):
    def explode(request):
        raise httpx.ConnectError("connection refused", request=request)

    store = build_remote_store(_settings(), transport=httpx.MockTransport(explode))
    try:
        assert await store.fees.get_by_id(1) is None
        assert await store.fees.delete(1) is False
    finally:
        await store.close()


def test_remote_store_requires_url():
    with pytest.raises(RuntimeError):
        build_remote_store(_settings(RECORD_SERVICE_URL=""))


@pytest.mark.asyncio
async def test_malformed_result_set_is_failure(remote, service):
    service.reply(success=True, results=["ok"])
    service.reply(success=True, results={"success": True})

    assert await remote.fees.update(9, {"status": FeeStatus.PAID}) is None
    assert await remote.payments.delete(4) is False
