"""Client Pydantic Schemas"""

from decimal import Decimal
from typing import ClassVar, FrozenSet, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.models.enums import ClientStatus
from app.schemas.base import PartialUpdate
from app.utils.money import ZERO, to_money


class ClientBase(BaseModel):
    """Fields a caller may author on a client"""
    name: str = Field(..., min_length=1, description="Client name cannot be empty")
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    address: Optional[str] = None


class ClientCreate(ClientBase):
    """New clients always start active with zero totals."""
    pass


class ClientUpdate(PartialUpdate):
    """Partial update. Totals are derived and cannot be set here."""
    CLEARABLE: ClassVar[FrozenSet[str]] = frozenset({"email", "phone", "company", "address"})

    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    address: Optional[str] = None
    status: Optional[ClientStatus] = None


class ClientTotals(BaseModel):
    """Aggregates derived from a client's fees"""
    total_due: Decimal = ZERO
    total_paid: Decimal = ZERO


class ClientRecord(BaseModel):
    """Canonical client record as seen by the services"""
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    address: Optional[str] = None
    status: ClientStatus = ClientStatus.ACTIVE
    total_due: Decimal = ZERO
    total_paid: Decimal = ZERO

    model_config = ConfigDict(from_attributes=True)

    @field_validator("total_due", "total_paid", mode="before")
    @classmethod
    def _as_money(cls, v):
        return to_money(v)

    @property
    def totals(self) -> ClientTotals:
        return ClientTotals(total_due=self.total_due, total_paid=self.total_paid)
