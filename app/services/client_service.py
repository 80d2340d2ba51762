"""Client Service - client records and on-demand reconciliation"""

from typing import List, Optional

from app.core.logging import get_logger
from app.core.result import Result, Success, not_found, read_failed, write_failed
from app.models.enums import ClientStatus
from app.schemas.client import ClientCreate, ClientRecord, ClientUpdate
from app.services.balance_service import BalanceService
from app.store.base import RecordStore
from app.utils.money import ZERO

logger = get_logger(__name__)


class ClientService:
    @staticmethod
    def matches(client: ClientRecord, term: str) -> bool:
        term = term.lower()
        return term in client.name.lower() or term in (client.email or "").lower()

    @staticmethod
    async def list_clients(
        store: RecordStore,
        status: Optional[ClientStatus] = None,
        search: Optional[str] = None,
    ) -> Result[List[ClientRecord]]:
        clients = await store.clients.list(status=status)
        if clients is None:
            return read_failed("Could not load clients")
        if search:
            clients = [c for c in clients if ClientService.matches(c, search)]
        return Success(value=clients)

    @staticmethod
    async def get_client(store: RecordStore, client_id: int) -> Result[ClientRecord]:
        client = await store.clients.get_by_id(client_id)
        if client is None:
            return not_found(f"Client {client_id} not found")
        return Success(value=client)

    @staticmethod
    async def create_client(store: RecordStore, data: ClientCreate) -> Result[ClientRecord]:
        fields = data.model_dump()
        fields.update(status=ClientStatus.ACTIVE, total_due=ZERO, total_paid=ZERO)
        client = await store.clients.create(fields)
        if client is None:
            return write_failed("Could not create client")
        logger.info(f"Client created: {client.id}", extra={"client_id": client.id})
        return Success(value=client)

    @staticmethod
    async def update_client(store: RecordStore, client_id: int, data: ClientUpdate) -> Result[ClientRecord]:
        existing = await store.clients.get_by_id(client_id)
        if existing is None:
            return not_found(f"Client {client_id} not found")
        fields = data.changes()
        if not fields:
            return Success(value=existing)
        client = await store.clients.update(client_id, fields)
        if client is None:
            return write_failed(f"Could not update client {client_id}")
        return Success(value=client)

    @staticmethod
    async def delete_client(store: RecordStore, client_id: int) -> Result[ClientRecord]:
        """Deletes only the client; its fees and payments are left in place."""
        existing = await store.clients.get_by_id(client_id)
        if existing is None:
            return not_found(f"Client {client_id} not found")
        if not await store.clients.delete(client_id):
            return write_failed(f"Could not delete client {client_id}")
        logger.info(f"Client deleted: {client_id}", extra={"client_id": client_id})
        return Success(value=existing)

    @staticmethod
    async def reconcile_client(store: RecordStore, client_id: int) -> Result[ClientRecord]:
        """Operator repair for stale totals left behind by a partial failure."""
        result = await BalanceService.recompute_client_totals(store, client_id)
        if not result.ok:
            return result
        return await ClientService.get_client(store, client_id)
