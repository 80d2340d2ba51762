"""Payment Pydantic Schemas"""

from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.enums import PaymentMethod
from app.schemas.base import PartialUpdate
from app.utils.money import to_money


class PaymentCreate(BaseModel):
    fee_id: int
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    payment_date: Optional[date] = Field(None, description="Defaults to today")
    method: PaymentMethod = PaymentMethod.BANK_TRANSFER
    reference: str = ""


class PaymentUpdate(PartialUpdate):
    fee_id: Optional[int] = None
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    payment_date: Optional[date] = None
    method: Optional[PaymentMethod] = None
    reference: Optional[str] = None


class PaymentRecord(BaseModel):
    """Canonical payment record as seen by the services"""
    id: int
    fee_id: int
    amount: Decimal
    payment_date: date
    method: PaymentMethod = PaymentMethod.OTHER
    reference: str = ""

    model_config = ConfigDict(from_attributes=True)

    @field_validator("amount", mode="before")
    @classmethod
    def _as_money(cls, v):
        return to_money(v)

    @field_validator("reference", mode="before")
    @classmethod
    def _blank_reference(cls, v):
        return v or ""
