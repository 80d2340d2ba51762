"""Unit tests for request schemas"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.models.enums import FeeCategory, PaymentMethod
from app.schemas.client import ClientCreate, ClientRecord, ClientUpdate
from app.schemas.fee import FeeCreate, FeeUpdate
from app.schemas.payment import PaymentCreate


def test_fee_defaults():
    fee = FeeCreate(client_id=1, description="Setup", amount=Decimal("10.00"), due_date=date(2026, 5, 1))

    assert fee.category == FeeCategory.CONSULTING
    assert fee.is_recurring is False


@pytest.mark.parametrize("amount", ["0", "-5.00", "1.005"])
def test_fee_amount_must_be_positive_cents(amount):
    with pytest.raises(ValidationError):
        FeeCreate(client_id=1, description="Setup", amount=Decimal(amount), due_date=date(2026, 5, 1))


def test_fee_description_required():
    with pytest.raises(ValidationError):
        FeeCreate(client_id=1, description="", amount=Decimal("10.00"), due_date=date(2026, 5, 1))


def test_fee_update_tracks_only_set_fields():
    update = FeeUpdate(amount=Decimal("20.00"))

    assert update.model_dump(exclude_unset=True) == {"amount": Decimal("20.00")}


def test_payment_defaults():
    payment = PaymentCreate(fee_id=3, amount=Decimal("5.00"))

    assert payment.method == PaymentMethod.BANK_TRANSFER
    assert payment.payment_date is None
    assert payment.reference == ""


def test_client_email_validated():
    with pytest.raises(ValidationError):
        ClientCreate(name="Acme Corp", email="not-an-email")
    with pytest.raises(ValidationError):
        ClientUpdate(name="")


def test_client_record_totals_quantized():
    client = ClientRecord(id=1, name="Acme Corp", total_due=12.5, total_paid=None)

    assert client.totals.total_due == Decimal("12.50")
    assert client.totals.total_paid == Decimal("0.00")
