"""Payment Service - payment writes with fee-status and client-total cascades"""

from typing import List, Optional

from app.core.logging import get_logger
from app.core.result import Result, Success, conflict, not_found, read_failed, write_failed
from app.models.enums import FeeStatus
from app.schemas.fee import FeeRecord
from app.schemas.payment import PaymentCreate, PaymentRecord, PaymentUpdate
from app.services.reconciliation_service import ReconciliationService
from app.store.base import RecordStore
from app.utils.time import get_today

logger = get_logger(__name__)


class PaymentService:
    @staticmethod
    async def _settleable_fee(store: RecordStore, fee_id: int) -> Result[FeeRecord]:
        # One settling payment per fee: a paid fee cannot take another
        matches = await store.fees.list(id=fee_id)
        if matches is None:
            return read_failed(f"Could not read fee {fee_id}")
        if not matches:
            return not_found(f"Fee {fee_id} not found")
        fee = matches[0]
        if fee.status == FeeStatus.PAID:
            return conflict(f"Fee {fee_id} is already paid")
        return Success(value=fee)

    @staticmethod
    async def list_payments(
        store: RecordStore,
        fee_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> Result[List[PaymentRecord]]:
        """Payments, most recent payment date first."""
        payments = await store.payments.list(fee_id=fee_id)
        if payments is None:
            return read_failed("Could not load payments")

        if search:
            fees = await store.fees.list()
            clients = await store.clients.list()
            if fees is None or clients is None:
                return read_failed("Could not load fees and clients for search")
            fees_by_id = {f.id: f for f in fees}
            clients_by_id = {c.id: c for c in clients}
            term = search.lower()

            def _matches(payment: PaymentRecord) -> bool:
                fee = fees_by_id.get(payment.fee_id)
                client = clients_by_id.get(fee.client_id) if fee else None
                return (
                    term in payment.reference.lower()
                    or term in payment.method.value.lower()
                    or (fee is not None and term in fee.description.lower())
                    or (client is not None and term in client.name.lower())
                )

            payments = [p for p in payments if _matches(p)]

        payments.sort(key=lambda p: (p.payment_date, p.id), reverse=True)
        return Success(value=payments)

    @staticmethod
    async def get_payment(store: RecordStore, payment_id: int) -> Result[PaymentRecord]:
        payment = await store.payments.get_by_id(payment_id)
        if payment is None:
            return not_found(f"Payment {payment_id} not found")
        return Success(value=payment)

    @staticmethod
    async def create_payment(store: RecordStore, data: PaymentCreate) -> Result[PaymentRecord]:
        """
        Record a payment, mark its fee paid, then reconcile the fee's client.
        """
        fee_result = await PaymentService._settleable_fee(store, data.fee_id)
        if not fee_result.ok:
            return fee_result
        fee = fee_result.value

        fields = data.model_dump()
        fields["payment_date"] = data.payment_date or get_today()
        payment = await store.payments.create(fields)
        if payment is None:
            return write_failed(f"Could not record payment for fee {data.fee_id}")
        logger.info(
            f"Payment recorded: {payment.id}",
            extra={"payment_id": payment.id, "fee_id": payment.fee_id},
        )

        _, warnings = await ReconciliationService.mark_fee_paid(store, payment.fee_id)
        warnings += await ReconciliationService.reconcile_clients(store, [fee.client_id])
        return Success(value=payment, warnings=warnings)

    @staticmethod
    async def update_payment(store: RecordStore, payment_id: int, data: PaymentUpdate) -> Result[PaymentRecord]:
        """
        Update a payment. Moving it to another fee restores the old fee to
        pending, marks the new fee paid and reconciles both clients.
        """
        existing = await store.payments.get_by_id(payment_id)
        if existing is None:
            return not_found(f"Payment {payment_id} not found")

        fields = data.changes()
        new_fee_id = fields.get("fee_id")
        moving = new_fee_id is not None and new_fee_id != existing.fee_id
        target = None
        if moving:
            fee_result = await PaymentService._settleable_fee(store, new_fee_id)
            if not fee_result.ok:
                return fee_result
            target = fee_result.value

        if not fields:
            return Success(value=existing)
        payment = await store.payments.update(payment_id, fields)
        if payment is None:
            return write_failed(f"Could not update payment {payment_id}")

        warnings = []
        client_ids = []
        if moving:
            old_fee, status_warnings = await ReconciliationService.mark_fee_unpaid(store, existing.fee_id)
            warnings += status_warnings
            if old_fee is not None:
                client_ids.append(old_fee.client_id)
            _, status_warnings = await ReconciliationService.mark_fee_paid(store, payment.fee_id)
            warnings += status_warnings
            client_ids.append(target.client_id)
        else:
            fee = await store.fees.get_by_id(payment.fee_id)
            if fee is not None:
                client_ids.append(fee.client_id)

        warnings += await ReconciliationService.reconcile_clients(store, client_ids)
        return Success(value=payment, warnings=warnings)

    @staticmethod
    async def delete_payment(store: RecordStore, payment_id: int) -> Result[PaymentRecord]:
        """Delete a payment, return its fee to pending and reconcile the client."""
        existing = await store.payments.get_by_id(payment_id)
        if existing is None:
            return not_found(f"Payment {payment_id} not found")
        if not await store.payments.delete(payment_id):
            return write_failed(f"Could not delete payment {payment_id}")
        logger.info(f"Payment deleted: {payment_id}", extra={"payment_id": payment_id})

        fee, warnings = await ReconciliationService.mark_fee_unpaid(store, existing.fee_id)
        if fee is not None:
            warnings += await ReconciliationService.reconcile_clients(store, [fee.client_id])
        return Success(value=existing, warnings=warnings)
