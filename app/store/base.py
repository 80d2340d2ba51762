"""
Record store contract.

A store exposes one repository per record kind (clients, fees, payments).
Repositories never raise for store-side problems: they log the cause and
return None (list/get/create/update) or False (delete). Callers treat those
returns as the failure signal.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, TypeVar

from app.schemas.client import ClientRecord
from app.schemas.fee import FeeRecord
from app.schemas.payment import PaymentRecord

R = TypeVar("R")


class Repository(ABC, Generic[R]):
    """CRUD over one record kind, in canonical field names."""

    kind: str = "record"

    @abstractmethod
    async def list(self, **filters: Any) -> Optional[List[R]]:
        """All records matching every equality filter; None if the read failed."""

    @abstractmethod
    async def get_by_id(self, record_id: int) -> Optional[R]:
        """The record, or None if it is absent or could not be read."""

    @abstractmethod
    async def create(self, fields: Dict[str, Any]) -> Optional[R]:
        """The created record, or None if the store rejected it."""

    @abstractmethod
    async def update(self, record_id: int, fields: Dict[str, Any]) -> Optional[R]:
        """The updated record, or None if absent or rejected."""

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        """True if the record was deleted."""


class RecordStore:
    """
    Handle passed into every service call.

    Holds the three repositories plus whatever the backend needs to release
    on shutdown (an engine, an HTTP client).
    """

    def __init__(
        self,
        clients: Repository[ClientRecord],
        fees: Repository[FeeRecord],
        payments: Repository[PaymentRecord],
        on_close: Optional[Callable[[], Awaitable[None]]] = None,
    ):
        self.clients = clients
        self.fees = fees
        self.payments = payments
        self._on_close = on_close

    async def close(self) -> None:
        if self._on_close is not None:
            await self._on_close()
            self._on_close = None
