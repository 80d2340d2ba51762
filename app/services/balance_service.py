"""Balance Service - derives a client's due/paid totals from its fees"""

from typing import Iterable

from app.core.logging import get_logger
from app.core.result import Result, Success, not_found, read_failed, write_failed
from app.models.enums import FeeStatus, UNPAID_FEE_STATUSES
from app.schemas.client import ClientTotals
from app.schemas.fee import FeeRecord
from app.store.base import RecordStore
from app.utils.money import sum_money

logger = get_logger(__name__)


class BalanceService:
    @staticmethod
    def compute_totals(fees: Iterable[FeeRecord]) -> ClientTotals:
        """
        Partition fees by stored status and sum each side exactly.

        pending and overdue count as due, paid counts as paid.
        """
        fees = list(fees)
        return ClientTotals(
            total_due=sum_money(f.amount for f in fees if f.status in UNPAID_FEE_STATUSES),
            total_paid=sum_money(f.amount for f in fees if f.status == FeeStatus.PAID),
        )

    @staticmethod
    async def recompute_client_totals(store: RecordStore, client_id: int) -> Result[ClientTotals]:
        """
        Recompute and overwrite a client's totals from its current fees.

        Idempotent: the same fee set always yields the same totals. Returns
        NOT_FOUND for an unknown client, READ_FAILED if the client or its
        fees cannot be read and WRITE_FAILED if the client write fails.
        Fees are never modified.
        """
        # list, not get_by_id: an unreadable client must not pass for a deleted one
        matches = await store.clients.list(id=client_id)
        if matches is None:
            return read_failed(f"Could not read client {client_id}")
        if not matches:
            logger.info(f"Skipping totals for missing client {client_id}")
            return not_found(f"Client {client_id} not found")

        fees = await store.fees.list(client_id=client_id)
        if fees is None:
            return read_failed(f"Could not read fees for client {client_id}")

        totals = BalanceService.compute_totals(fees)
        updated = await store.clients.update(client_id, totals.model_dump())
        if updated is None:
            return write_failed(f"Could not write totals for client {client_id}")

        logger.debug(
            f"Client {client_id} totals recomputed",
            extra={
                "client_id": client_id,
                "total_due": str(totals.total_due),
                "total_paid": str(totals.total_paid),
            },
        )
        return Success(value=totals)
