"""Fee Service - fee writes with client-total reconciliation"""

from datetime import date
from typing import Dict, List, Optional

from app.core.logging import get_logger
from app.core.result import Result, Success, not_found, read_failed, write_failed
from app.models.enums import FeeStatus
from app.schemas.client import ClientRecord
from app.schemas.fee import FeeCreate, FeeRecord, FeeUpdate
from app.services.fee_status_service import FeeStatusService
from app.services.reconciliation_service import ReconciliationService
from app.store.base import RecordStore

logger = get_logger(__name__)


class FeeService:
    @staticmethod
    def matches(fee: FeeRecord, term: str, clients: Dict[int, ClientRecord]) -> bool:
        term = term.lower()
        client = clients.get(fee.client_id)
        return (
            term in fee.description.lower()
            or term in fee.category.value.lower()
            or (client is not None and term in client.name.lower())
        )

    @staticmethod
    async def list_fees(
        store: RecordStore,
        client_id: Optional[int] = None,
        status: Optional[FeeStatus] = None,
        search: Optional[str] = None,
        as_of: Optional[date] = None,
    ) -> Result[List[FeeRecord]]:
        """
        Fees with their effective status. The status filter applies to the
        effective status, so status=overdue finds pending fees past due.
        """
        fees = await store.fees.list(client_id=client_id)
        if fees is None:
            return read_failed("Could not load fees")
        fees = FeeStatusService.apply_effective_status(fees, as_of)

        if status is not None:
            fees = [f for f in fees if f.status == status]
        if search:
            clients = await store.clients.list()
            if clients is None:
                return read_failed("Could not load clients")
            by_id = {c.id: c for c in clients}
            fees = [f for f in fees if FeeService.matches(f, search, by_id)]
        return Success(value=fees)

    @staticmethod
    async def get_fee(store: RecordStore, fee_id: int, as_of: Optional[date] = None) -> Result[FeeRecord]:
        fee = await store.fees.get_by_id(fee_id)
        if fee is None:
            return not_found(f"Fee {fee_id} not found")
        return Success(value=FeeStatusService.apply_effective_status([fee], as_of)[0])

    @staticmethod
    async def create_fee(store: RecordStore, data: FeeCreate) -> Result[FeeRecord]:
        if await store.clients.get_by_id(data.client_id) is None:
            return not_found(f"Client {data.client_id} not found")

        fields = data.model_dump()
        fields["status"] = FeeStatus.PENDING
        fee = await store.fees.create(fields)
        if fee is None:
            return write_failed("Could not create fee")
        logger.info(f"Fee created: {fee.id}", extra={"fee_id": fee.id, "client_id": fee.client_id})

        warnings = await ReconciliationService.reconcile_clients(store, [fee.client_id])
        return Success(value=fee, warnings=warnings)

    @staticmethod
    async def update_fee(store: RecordStore, fee_id: int, data: FeeUpdate) -> Result[FeeRecord]:
        """
        Update a fee, then reconcile its previous client and, when the fee
        moved, its new client.
        """
        existing = await store.fees.get_by_id(fee_id)
        if existing is None:
            return not_found(f"Fee {fee_id} not found")

        fields = data.changes()
        new_client_id = fields.get("client_id")
        if new_client_id is not None and new_client_id != existing.client_id:
            if await store.clients.get_by_id(new_client_id) is None:
                return not_found(f"Client {new_client_id} not found")

        if not fields:
            return Success(value=existing)
        fee = await store.fees.update(fee_id, fields)
        if fee is None:
            return write_failed(f"Could not update fee {fee_id}")

        warnings = await ReconciliationService.reconcile_clients(store, [existing.client_id, fee.client_id])
        return Success(value=fee, warnings=warnings)

    @staticmethod
    async def delete_fee(store: RecordStore, fee_id: int) -> Result[FeeRecord]:
        """Payments recorded against the fee are kept."""
        existing = await store.fees.get_by_id(fee_id)
        if existing is None:
            return not_found(f"Fee {fee_id} not found")
        if not await store.fees.delete(fee_id):
            return write_failed(f"Could not delete fee {fee_id}")
        logger.info(f"Fee deleted: {fee_id}", extra={"fee_id": fee_id})

        warnings = await ReconciliationService.reconcile_clients(store, [existing.client_id])
        return Success(value=existing, warnings=warnings)
