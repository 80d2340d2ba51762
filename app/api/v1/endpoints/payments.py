"""Payment endpoints"""

from typing import Any, List, Optional
from fastapi import APIRouter, Depends

from app.api import deps
from app.schemas.payment import PaymentCreate, PaymentRecord, PaymentUpdate
from app.schemas.responses import SuccessResponse
from app.services.payment_service import PaymentService
from app.store.base import RecordStore

router = APIRouter()


@router.get("", response_model=SuccessResponse[List[PaymentRecord]])
async def list_payments(
    fee_id: Optional[int] = None,
    search: Optional[str] = None,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    """List payments, most recent first."""
    return deps.respond(await PaymentService.list_payments(store, fee_id=fee_id, search=search))


@router.post("", response_model=SuccessResponse[PaymentRecord])
async def create_payment(
    payment_in: PaymentCreate,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    """Record a payment against an unpaid fee; the fee becomes paid."""
    result = await PaymentService.create_payment(store, payment_in)
    return deps.respond(result, "Payment recorded successfully")


@router.get("/{payment_id}", response_model=SuccessResponse[PaymentRecord])
async def get_payment(
    payment_id: int,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    return deps.respond(await PaymentService.get_payment(store, payment_id))


@router.patch("/{payment_id}", response_model=SuccessResponse[PaymentRecord])
async def update_payment(
    payment_id: int,
    payment_in: PaymentUpdate,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    result = await PaymentService.update_payment(store, payment_id, payment_in)
    return deps.respond(result, "Payment updated successfully")


@router.delete("/{payment_id}", response_model=SuccessResponse[PaymentRecord])
async def delete_payment(
    payment_id: int,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    """Delete a payment; its fee goes back to pending."""
    result = await PaymentService.delete_payment(store, payment_id)
    return deps.respond(result, "Payment deleted successfully")
