"""
Hosted record-service backend.

Speaks the service's JSON API over httpx. Every transport error, non-2xx
status, unsuccessful envelope or malformed record is logged here and
reported to the services as None/False.
"""

from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from app.config import Settings
from app.core.logging import get_logger
from app.store.base import R, RecordStore, Repository
from app.store.fields import CLIENT_FIELDS, FEE_FIELDS, PAYMENT_FIELDS, FieldMap

logger = get_logger(__name__)


class RemoteRepository(Repository[R]):
    def __init__(self, http: httpx.AsyncClient, fields: FieldMap):
        self._http = http
        self._fields = fields
        self.kind = fields.kind

    @property
    def _records_path(self) -> str:
        return f"/tables/{self._fields.table}/records"

    async def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        try:
            response = await self._http.request(method, path, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            logger.error(
                f"Record service {method} {path} failed: {e}",
                extra={"kind": self.kind, "path": path},
            )
            return None
        except ValueError as e:
            logger.error(
                f"Record service {method} {path} returned invalid JSON: {e}",
                extra={"kind": self.kind, "path": path},
            )
            return None

        if not isinstance(body, dict) or not body.get("success"):
            message = body.get("message") if isinstance(body, dict) else body
            logger.error(
                f"Record service rejected {method} {path}: {message}",
                extra={"kind": self.kind, "path": path},
            )
            return None
        return body

    def _parse(self, data: Any) -> Optional[R]:
        if not isinstance(data, dict):
            logger.error(f"Record service returned no {self.kind} data", extra={"kind": self.kind})
            return None
        try:
            return self._fields.from_wire(data)
        except ValidationError as e:
            logger.error(
                f"Malformed {self.kind} record from record service: {e}",
                extra={"kind": self.kind, "record_id": data.get("Id")},
            )
            return None

    def _first_result(self, body: Dict[str, Any], action: str) -> Optional[Dict[str, Any]]:
        results = body.get("results") or []
        first = results[0] if isinstance(results, list) and results else None
        if not isinstance(first, dict) or not first.get("success"):
            message = first.get("message") if isinstance(first, dict) else f"malformed result set: {results!r}"
            logger.error(
                f"Record service could not {action} {self.kind}: {message}",
                extra={"kind": self.kind, "action": action},
            )
            return None
        return first

    async def list(self, **filters: Any) -> Optional[List[R]]:
        where = [
            {
                "FieldName": self._fields.wire_name(name),
                "Operator": "EqualTo",
                "Values": [self._fields.to_wire({name: value})[self._fields.wire_name(name)]],
            }
            for name, value in filters.items()
            if value is not None
        ]
        body = await self._request(
            "POST",
            f"/tables/{self._fields.table}/fetch",
            {"fields": self._fields.wire_fields, "where": where},
        )
        if body is None:
            return None
        records = []
        for data in body.get("data") or []:
            record = self._parse(data)
            if record is None:
                return None
            records.append(record)
        return records

    async def get_by_id(self, record_id: int) -> Optional[R]:
        body = await self._request("GET", f"{self._records_path}/{record_id}")
        if body is None:
            return None
        return self._parse(body.get("data"))

    async def create(self, fields: Dict[str, Any]) -> Optional[R]:
        body = await self._request("POST", self._records_path, {"records": [self._fields.to_wire(fields)]})
        if body is None:
            return None
        result = self._first_result(body, "create")
        return self._parse(result.get("data")) if result else None

    async def update(self, record_id: int, fields: Dict[str, Any]) -> Optional[R]:
        payload = {"Id": record_id, **self._fields.to_wire(fields)}
        body = await self._request("PATCH", self._records_path, {"records": [payload]})
        if body is None:
            return None
        result = self._first_result(body, "update")
        return self._parse(result.get("data")) if result else None

    async def delete(self, record_id: int) -> bool:
        body = await self._request("DELETE", self._records_path, {"RecordIds": [record_id]})
        if body is None:
            return False
        return self._first_result(body, "delete") is not None


def build_remote_store(config: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> RecordStore:
    """Record store over the hosted record service; owns its HTTP client."""
    if not config.RECORD_SERVICE_URL:
        raise RuntimeError("Remote record store not configured: set RECORD_SERVICE_URL")
    headers = {"Accept": "application/json"}
    if config.RECORD_SERVICE_API_KEY:
        headers["Authorization"] = f"Bearer {config.RECORD_SERVICE_API_KEY}"
    http = httpx.AsyncClient(
        base_url=config.RECORD_SERVICE_URL.rstrip("/"),
        headers=headers,
        timeout=config.STORE_TIMEOUT_SECONDS,
        transport=transport,
    )
    return RecordStore(
        clients=RemoteRepository(http, CLIENT_FIELDS),
        fees=RemoteRepository(http, FEE_FIELDS),
        payments=RemoteRepository(http, PAYMENT_FIELDS),
        on_close=http.aclose,
    )
