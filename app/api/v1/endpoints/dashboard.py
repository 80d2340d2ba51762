from datetime import date
from typing import Any, Optional
from fastapi import APIRouter, Depends

from app.api import deps
from app.schemas.dashboard import DashboardSummary
from app.schemas.responses import SuccessResponse
from app.services.dashboard_service import DashboardService
from app.store.base import RecordStore

router = APIRouter()


@router.get("", response_model=SuccessResponse[DashboardSummary])
async def get_dashboard(
    as_of: Optional[date] = None,
    store: RecordStore = Depends(deps.get_store),
) -> Any:
    """
    Collected, pending and overdue totals, recent activity and open actions.
    """
    return deps.respond(await DashboardService.get_summary(store, as_of))
