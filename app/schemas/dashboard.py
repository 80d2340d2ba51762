"""Dashboard schemas."""

from datetime import date
from decimal import Decimal
from typing import List, Literal

from pydantic import BaseModel, Field


class ActivityItem(BaseModel):
    """A recent payment or an overdue fee shown on the dashboard feed"""
    id: str
    type: Literal["payment", "overdue"]
    description: str
    amount: Decimal
    occurred_on: date


class PendingAction(BaseModel):
    id: str
    title: str
    description: str
    priority: Literal["high", "medium"]
    count: int = Field(..., ge=1)


class DashboardSummary(BaseModel):
    """
    Aggregated figures across all clients.
    Returned by GET /api/v1/dashboard.
    """

    total_collected: Decimal = Field(..., description="Sum of all recorded payments")
    total_pending: Decimal = Field(..., description="Sum of fees whose effective status is pending")
    total_overdue: Decimal = Field(..., description="Sum of fees whose effective status is overdue")
    total_clients: int = Field(..., ge=0)
    recent_activity: List[ActivityItem] = []
    pending_actions: List[PendingAction] = []
