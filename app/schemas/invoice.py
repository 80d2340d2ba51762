"""Invoice view schemas. Invoices are a read-only projection of fees."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from app.models.enums import FeeCategory, FeeStatus


class InvoiceView(BaseModel):
    id: int
    invoice_number: str
    client_id: int
    client_name: str
    client_email: str = ""
    description: str
    amount: Decimal
    due_date: date
    status: FeeStatus
    category: FeeCategory
    is_recurring: bool
