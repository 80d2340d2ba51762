"""Fee Status Service - payment-driven status changes and overdue derivation"""

from datetime import date
from typing import Iterable, List, Optional

from app.core.logging import get_logger
from app.core.result import Result, Success, not_found, read_failed, write_failed
from app.models.enums import FeeStatus
from app.schemas.fee import FeeRecord
from app.store.base import RecordStore
from app.utils.time import get_today

logger = get_logger(__name__)


class FeeStatusService:
    @staticmethod
    def derive_effective_status(fee: FeeRecord, as_of: date) -> FeeStatus:
        """A pending fee is overdue once as_of is strictly after its due date."""
        if fee.status == FeeStatus.PENDING and as_of > fee.due_date:
            return FeeStatus.OVERDUE
        return fee.status

    @staticmethod
    def apply_effective_status(fees: Iterable[FeeRecord], as_of: Optional[date] = None) -> List[FeeRecord]:
        """Copies of the fees carrying their effective status. Nothing is written."""
        as_of = as_of or get_today()
        out = []
        for fee in fees:
            status = FeeStatusService.derive_effective_status(fee, as_of)
            out.append(fee if status == fee.status else fee.model_copy(update={"status": status}))
        return out

    @staticmethod
    async def _set_status(store: RecordStore, fee_id: int, status: FeeStatus) -> Result[FeeRecord]:
        # Unconditional write; the current status is not checked.
        # A failed read is READ_FAILED so callers can tell it from a deleted fee.
        matches = await store.fees.list(id=fee_id)
        if matches is None:
            return read_failed(f"Could not read fee {fee_id}")
        if not matches:
            return not_found(f"Fee {fee_id} not found")
        fee = matches[0]
        updated = await store.fees.update(fee_id, {"status": status})
        if updated is None:
            return write_failed(f"Could not set fee {fee_id} status to {status.value}")
        logger.info(
            f"Fee {fee_id} status {fee.status.value} -> {status.value}",
            extra={"fee_id": fee_id, "status": status.value},
        )
        return Success(value=updated)

    @staticmethod
    async def on_payment_recorded(store: RecordStore, fee_id: int) -> Result[FeeRecord]:
        return await FeeStatusService._set_status(store, fee_id, FeeStatus.PAID)

    @staticmethod
    async def on_payment_removed(store: RecordStore, fee_id: int) -> Result[FeeRecord]:
        """Back to pending; overdue is re-derived on the next read."""
        return await FeeStatusService._set_status(store, fee_id, FeeStatus.PENDING)
