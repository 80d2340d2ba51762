"""Reconciliation Service - runs cascades after a committed primary write"""

from typing import Iterable, List, Optional, Tuple

from app.core.logging import get_logger
from app.core.result import CascadeStep, CascadeWarning, ErrorKind, Failure
from app.schemas.fee import FeeRecord
from app.services.balance_service import BalanceService
from app.services.fee_status_service import FeeStatusService
from app.store.base import RecordStore

logger = get_logger(__name__)


class ReconciliationService:
    """
    Cascade helpers shared by the fee and payment services.

    Nothing here rolls back: a failed cascade becomes a CascadeWarning that
    travels with the successful primary result.
    """

    @staticmethod
    def warn(step: CascadeStep, record_id: Optional[int], detail: str) -> CascadeWarning:
        logger.warning(
            f"Cascade {step.value} failed for record {record_id}: {detail}",
            extra={"cascade_step": step.value, "record_id": record_id},
        )
        return CascadeWarning(step=step, record_id=record_id, detail=detail)

    @staticmethod
    async def reconcile_clients(store: RecordStore, client_ids: Iterable[Optional[int]]) -> List[CascadeWarning]:
        """
        Recompute totals for each distinct client, in order.

        A client that no longer exists has no totals to go stale and is
        skipped; any other failure is reported as a client_totals warning.
        """
        warnings = []
        for client_id in dict.fromkeys(cid for cid in client_ids if cid is not None):
            result = await BalanceService.recompute_client_totals(store, client_id)
            if result.ok:
                continue
            if result.kind == ErrorKind.NOT_FOUND:
                continue
            warnings.append(ReconciliationService.warn(CascadeStep.CLIENT_TOTALS, client_id, result.detail))
        return warnings

    @staticmethod
    async def mark_fee_paid(store: RecordStore, fee_id: int) -> Tuple[Optional[FeeRecord], List[CascadeWarning]]:
        """Status cascade for a recorded payment. A missing fee is a warning here."""
        result = await FeeStatusService.on_payment_recorded(store, fee_id)
        if isinstance(result, Failure):
            return None, [ReconciliationService.warn(CascadeStep.FEE_STATUS, fee_id, result.detail)]
        return result.value, []

    @staticmethod
    async def mark_fee_unpaid(store: RecordStore, fee_id: int) -> Tuple[Optional[FeeRecord], List[CascadeWarning]]:
        """
        Status cascade for a removed payment. A fee deleted in the meantime
        has no status to restore, so NOT_FOUND is logged and ignored.
        """
        result = await FeeStatusService.on_payment_removed(store, fee_id)
        if isinstance(result, Failure):
            if result.kind == ErrorKind.NOT_FOUND:
                logger.info(f"Fee {fee_id} already gone; no status to restore")
                return None, []
            return None, [ReconciliationService.warn(CascadeStep.FEE_STATUS, fee_id, result.detail)]
        return result.value, []
