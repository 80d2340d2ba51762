"""Shared pytest fixtures: isolated record stores and an API client."""

import os

# Must be set before app modules read settings
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import date
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from app.api import deps
from app.config import settings
from app.database import create_engine, init_db
from app.main import app
from app.models.enums import FeeCategory, FeeStatus, PaymentMethod
from app.store.sql import build_sql_store


@pytest.fixture
def as_of() -> date:
    """Reference "today" for overdue derivation."""
    return date(2026, 3, 15)


@pytest.fixture
async def store():
    """Fresh in-memory SQLite record store per test."""
    engine = create_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await init_db(engine)
    record_store = build_sql_store(engine)
    yield record_store
    await record_store.close()


@pytest.fixture
def api_base() -> str:
    """Base URL for API requests."""
    return f"http://test{settings.API_V1_PREFIX}"


@pytest.fixture
async def async_client(store, api_base: str):
    """Async HTTP client wired to the per-test store."""
    app.dependency_overrides[deps.get_store] = lambda: store
    transport = ASGITransport(app=app)
    client = AsyncClient(transport=transport, base_url=api_base, timeout=30.0)
    yield client
    await client.aclose()
    app.dependency_overrides.pop(deps.get_store, None)


@pytest.fixture
def make_client(store):
    """Create a client directly in the store."""
    async def _make(name: str = "Acme Corp", **fields):
        fields.setdefault("email", f"{name.split()[0].lower()}@example.com")
        client = await store.clients.create({"name": name, **fields})
        assert client is not None
        return client
    return _make


@pytest.fixture
def make_fee(store):
    """Create a fee directly in the store (no cascades)."""
    async def _make(client_id: int, amount: str = "100.00", status: FeeStatus = FeeStatus.PENDING, **fields):
        fields.setdefault("description", "Monthly retainer")
        fields.setdefault("due_date", date(2026, 4, 1))
        fields.setdefault("category", FeeCategory.CONSULTING)
        fee = await store.fees.create({
            "client_id": client_id,
            "amount": Decimal(amount),
            "status": status,
            **fields,
        })
        assert fee is not None
        return fee
    return _make


@pytest.fixture
def make_payment(store):
    """Create a payment directly in the store (no cascades)."""
    async def _make(fee_id: int, amount: str = "100.00", **fields):
        fields.setdefault("payment_date", date(2026, 3, 1))
        fields.setdefault("method", PaymentMethod.BANK_TRANSFER)
        fields.setdefault("reference", "TX-1")
        payment = await store.payments.create({"fee_id": fee_id, "amount": Decimal(amount), **fields})
        assert payment is not None
        return payment
    return _make
