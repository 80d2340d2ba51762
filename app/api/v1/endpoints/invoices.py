"""Invoice endpoints (read-only views over fees)"""

from datetime import date
from typing import Any, List, Optional
from fastapi import APIRouter, Depends

from app.api import deps
from app.schemas.invoice import InvoiceView
from app.schemas.responses import SuccessResponse
from app.services.invoice_service import InvoiceService
from app.store.base import RecordStore

router = APIRouter()


@router.get("", response_model=SuccessResponse[List[InvoiceView]])
async def list_invoices(
    search: Optional[str] = None,
    as_of: Optional[date] = None,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    return deps.respond(await InvoiceService.list_invoices(store, search=search, as_of=as_of))


@router.get("/{fee_id}", response_model=SuccessResponse[InvoiceView])
async def get_invoice(
    fee_id: int,
    as_of: Optional[date] = None,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    return deps.respond(await InvoiceService.get_invoice(store, fee_id, as_of))
