"""Fee Pydantic Schemas"""

from datetime import date
from decimal import Decimal
from typing import ClassVar, FrozenSet, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.enums import FeeCategory, FeeStatus
from app.schemas.base import PartialUpdate
from app.utils.money import to_money


class FeeBase(BaseModel):
    client_id: int
    description: str = Field(..., min_length=1)
    note: Optional[str] = None
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    due_date: date
    category: FeeCategory = FeeCategory.CONSULTING
    is_recurring: bool = False


class FeeCreate(FeeBase):
    """New fees are always stored as pending."""
    pass


class FeeUpdate(PartialUpdate):
    CLEARABLE: ClassVar[FrozenSet[str]] = frozenset({"note"})

    client_id: Optional[int] = None
    description: Optional[str] = Field(None, min_length=1)
    note: Optional[str] = None
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    due_date: Optional[date] = None
    category: Optional[FeeCategory] = None
    is_recurring: Optional[bool] = None
    status: Optional[FeeStatus] = None


class FeeRecord(BaseModel):
    """Canonical fee record as seen by the services"""
    id: int
    client_id: int
    description: str
    note: Optional[str] = None
    amount: Decimal
    due_date: date
    category: FeeCategory = FeeCategory.OTHER
    is_recurring: bool = False
    status: FeeStatus = FeeStatus.PENDING

    model_config = ConfigDict(from_attributes=True)

    @field_validator("amount", mode="before")
    @classmethod
    def _as_money(cls, v):
        return to_money(v)
