"""SQLAlchemy-backed record store"""

from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel as RecordModel
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.core.logging import get_logger
from app.database import Base, close_db, create_session_factory
from app.models.client import Client
from app.models.fee import Fee
from app.models.payment import Payment
from app.schemas.client import ClientRecord
from app.schemas.fee import FeeRecord
from app.schemas.payment import PaymentRecord
from app.store.base import R, RecordStore, Repository

logger = get_logger(__name__)


class SqlRepository(Repository[R]):
    """
    One ORM model exposed through the record store contract.

    Each call runs in its own session and commits before returning, so a
    cascade issued afterwards always observes the write.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        model: Type[Base],
        record_type: Type[RecordModel],
        kind: str,
    ):
        self._session_factory = session_factory
        self._model = model
        self._record_type = record_type
        self.kind = kind

    def _to_record(self, row: Any) -> R:
        return self._record_type.model_validate(row)

    def _log_error(self, action: str, error: SQLAlchemyError, record_id: Optional[int] = None) -> None:
        logger.error(
            f"Failed to {action} {self.kind}: {error}",
            extra={"kind": self.kind, "action": action, "record_id": record_id},
        )

    async def list(self, **filters: Any) -> Optional[List[R]]:
        stmt = select(self._model).order_by(self._model.id)
        for name, value in filters.items():
            if value is None:
                continue
            stmt = stmt.where(getattr(self._model, name) == value)
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return [self._to_record(row) for row in result.scalars().all()]
        except SQLAlchemyError as e:
            self._log_error("list", e)
            return None

    async def get_by_id(self, record_id: int) -> Optional[R]:
        try:
            async with self._session_factory() as session:
                row = await session.get(self._model, record_id)
                return self._to_record(row) if row is not None else None
        except SQLAlchemyError as e:
            self._log_error("read", e, record_id)
            return None

    async def create(self, fields: Dict[str, Any]) -> Optional[R]:
        try:
            async with self._session_factory() as session:
                row = self._model(**fields)
                session.add(row)
                await session.commit()
                await session.refresh(row)
                return self._to_record(row)
        except SQLAlchemyError as e:
            self._log_error("create", e)
            return None

    async def update(self, record_id: int, fields: Dict[str, Any]) -> Optional[R]:
        try:
            async with self._session_factory() as session:
                row = await session.get(self._model, record_id)
                if row is None:
                    logger.info(f"{self.kind} {record_id} not found for update")
                    return None
                for name, value in fields.items():
                    setattr(row, name, value)
                await session.commit()
                await session.refresh(row)
                return self._to_record(row)
        except SQLAlchemyError as e:
            self._log_error("update", e, record_id)
            return None

    async def delete(self, record_id: int) -> bool:
        try:
            async with self._session_factory() as session:
                row = await session.get(self._model, record_id)
                if row is None:
                    logger.info(f"{self.kind} {record_id} not found for delete")
                    return False
                await session.delete(row)
                await session.commit()
                return True
        except SQLAlchemyError as e:
            self._log_error("delete", e, record_id)
            return False


def build_sql_store(engine: AsyncEngine, dispose_engine: bool = True) -> RecordStore:
    """Record store over an existing engine."""
    session_factory = create_session_factory(engine)

    async def _close() -> None:
        if dispose_engine:
            await close_db(engine)

    return RecordStore(
        clients=SqlRepository(session_factory, Client, ClientRecord, "client"),
        fees=SqlRepository(session_factory, Fee, FeeRecord, "fee"),
        payments=SqlRepository(session_factory, Payment, PaymentRecord, "payment"),
        on_close=_close,
    )
