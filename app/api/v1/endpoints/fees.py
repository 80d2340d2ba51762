"""Fee endpoints"""

from datetime import date
from typing import Any, List, Optional
from fastapi import APIRouter, Depends

from app.api import deps
from app.models.enums import FeeStatus
from app.schemas.fee import FeeCreate, FeeRecord, FeeUpdate
from app.schemas.responses import SuccessResponse
from app.services.fee_service import FeeService
from app.store.base import RecordStore

router = APIRouter()


@router.get("", response_model=SuccessResponse[List[FeeRecord]])
async def list_fees(
    client_id: Optional[int] = None,
    status: Optional[FeeStatus] = None,
    search: Optional[str] = None,
    as_of: Optional[date] = None,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    """
    List fees with their effective status.

    Pending fees past their due date (relative to as_of, default today) are
    reported as overdue; the status filter matches the effective status.
    """
    result = await FeeService.list_fees(
        store, client_id=client_id, status=status, search=search, as_of=as_of
    )
    return deps.respond(result)


@router.post("", response_model=SuccessResponse[FeeRecord])
async def create_fee(
    fee_in: FeeCreate,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    """Create a pending fee and refresh the client's totals."""
    result = await FeeService.create_fee(store, fee_in)
    return deps.respond(result, "Fee created successfully")


@router.get("/{fee_id}", response_model=SuccessResponse[FeeRecord])
async def get_fee(
    fee_id: int,
    as_of: Optional[date] = None,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    return deps.respond(await FeeService.get_fee(store, fee_id, as_of))


@router.patch("/{fee_id}", response_model=SuccessResponse[FeeRecord])
async def update_fee(
    fee_id: int,
    fee_in: FeeUpdate,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    """Update a fee; totals are refreshed for the old and new client."""
    result = await FeeService.update_fee(store, fee_id, fee_in)
    return deps.respond(result, "Fee updated successfully")


@router.delete("/{fee_id}", response_model=SuccessResponse[FeeRecord])
async def delete_fee(
    fee_id: int,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    result = await FeeService.delete_fee(store, fee_id)
    return deps.respond(result, "Fee deleted successfully")
