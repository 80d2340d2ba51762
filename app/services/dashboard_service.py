"""Dashboard Service - headline figures and activity feed"""

from datetime import date
from typing import Dict, List, Optional

from app.core.result import Result, Success, read_failed
from app.models.enums import FeeStatus
from app.schemas.client import ClientRecord
from app.schemas.dashboard import ActivityItem, DashboardSummary, PendingAction
from app.schemas.fee import FeeRecord
from app.schemas.payment import PaymentRecord
from app.services.fee_status_service import FeeStatusService
from app.store.base import RecordStore
from app.utils.money import sum_money

UNKNOWN_CLIENT = "Unknown Client"
RECENT_PAYMENTS = 3
OLDEST_OVERDUE = 2
ACTIVITY_LIMIT = 5


class DashboardService:
    @staticmethod
    def _client_name(fee: Optional[FeeRecord], clients: Dict[int, ClientRecord]) -> str:
        client = clients.get(fee.client_id) if fee else None
        return client.name if client else UNKNOWN_CLIENT

    @staticmethod
    def build_activity(
        payments: List[PaymentRecord],
        fees: List[FeeRecord],
        clients: Dict[int, ClientRecord],
    ) -> List[ActivityItem]:
        """Latest payments plus the longest-overdue fees, newest first."""
        fees_by_id = {f.id: f for f in fees}
        activity = []
        for payment in sorted(payments, key=lambda p: p.payment_date, reverse=True)[:RECENT_PAYMENTS]:
            name = DashboardService._client_name(fees_by_id.get(payment.fee_id), clients)
            activity.append(ActivityItem(
                id=f"payment-{payment.id}",
                type="payment",
                description=f"Payment received from {name}",
                amount=payment.amount,
                occurred_on=payment.payment_date,
            ))

        overdue = [f for f in fees if f.status == FeeStatus.OVERDUE]
        for fee in sorted(overdue, key=lambda f: f.due_date)[:OLDEST_OVERDUE]:
            activity.append(ActivityItem(
                id=f"overdue-{fee.id}",
                type="overdue",
                description=f"Overdue fee from {DashboardService._client_name(fee, clients)}",
                amount=fee.amount,
                occurred_on=fee.due_date,
            ))

        activity.sort(key=lambda a: a.occurred_on, reverse=True)
        return activity[:ACTIVITY_LIMIT]

    @staticmethod
    def build_actions(fees: List[FeeRecord]) -> List[PendingAction]:
        actions = []
        overdue = sum(1 for f in fees if f.status == FeeStatus.OVERDUE)
        pending = sum(1 for f in fees if f.status == FeeStatus.PENDING)
        if overdue:
            actions.append(PendingAction(
                id="overdue-fees",
                title=f"{overdue} Overdue Fee{'s' if overdue > 1 else ''}",
                description="Require immediate attention",
                priority="high",
                count=overdue,
            ))
        if pending:
            actions.append(PendingAction(
                id="pending-fees",
                title=f"{pending} Pending Fee{'s' if pending > 1 else ''}",
                description="Awaiting payment",
                priority="medium",
                count=pending,
            ))
        return actions

    @staticmethod
    async def get_summary(store: RecordStore, as_of: Optional[date] = None) -> Result[DashboardSummary]:
        clients = await store.clients.list()
        fees = await store.fees.list()
        payments = await store.payments.list()
        if clients is None or fees is None or payments is None:
            return read_failed("Could not load dashboard data")

        fees = FeeStatusService.apply_effective_status(fees, as_of)
        clients_by_id = {c.id: c for c in clients}
        return Success(value=DashboardSummary(
            total_collected=sum_money(p.amount for p in payments),
            total_pending=sum_money(f.amount for f in fees if f.status == FeeStatus.PENDING),
            total_overdue=sum_money(f.amount for f in fees if f.status == FeeStatus.OVERDUE),
            total_clients=len(clients),
            recent_activity=DashboardService.build_activity(payments, fees, clients_by_id),
            pending_actions=DashboardService.build_actions(fees),
        ))
