"""Invoice Service - invoice views derived from fees"""

from datetime import date
from typing import List, Optional

from app.core.result import Result, Success, not_found, read_failed
from app.schemas.client import ClientRecord
from app.schemas.fee import FeeRecord
from app.schemas.invoice import InvoiceView
from app.services.fee_status_service import FeeStatusService
from app.store.base import RecordStore

UNKNOWN_CLIENT = "Unknown Client"


class InvoiceService:
    @staticmethod
    def invoice_number(fee_id: int) -> str:
        return f"INV-{fee_id:04d}"

    @staticmethod
    def to_invoice(fee: FeeRecord, client: Optional[ClientRecord]) -> InvoiceView:
        return InvoiceView(
            id=fee.id,
            invoice_number=InvoiceService.invoice_number(fee.id),
            client_id=fee.client_id,
            client_name=client.name if client else UNKNOWN_CLIENT,
            client_email=(client.email or "") if client else "",
            description=fee.description,
            amount=fee.amount,
            due_date=fee.due_date,
            status=fee.status,
            category=fee.category,
            is_recurring=fee.is_recurring,
        )

    @staticmethod
    async def list_invoices(
        store: RecordStore,
        search: Optional[str] = None,
        as_of: Optional[date] = None,
    ) -> Result[List[InvoiceView]]:
        """One invoice per fee, latest due date first."""
        fees = await store.fees.list()
        clients = await store.clients.list()
        if fees is None or clients is None:
            return read_failed("Could not load invoices")

        by_id = {c.id: c for c in clients}
        invoices = [
            InvoiceService.to_invoice(fee, by_id.get(fee.client_id))
            for fee in FeeStatusService.apply_effective_status(fees, as_of)
        ]
        if search:
            term = search.lower()
            invoices = [
                i for i in invoices
                if term in i.invoice_number.lower()
                or term in i.client_name.lower()
                or term in i.description.lower()
            ]
        invoices.sort(key=lambda i: (i.due_date, i.id), reverse=True)
        return Success(value=invoices)

    @staticmethod
    async def get_invoice(store: RecordStore, fee_id: int, as_of: Optional[date] = None) -> Result[InvoiceView]:
        fee = await store.fees.get_by_id(fee_id)
        if fee is None:
            return not_found(f"Invoice for fee {fee_id} not found")
        client = await store.clients.get_by_id(fee.client_id)
        fee = FeeStatusService.apply_effective_status([fee], as_of)[0]
        return Success(value=InvoiceService.to_invoice(fee, client))
