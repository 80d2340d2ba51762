"""
Canonical <-> record-service field names.

The hosted record service names custom columns with a "_c" suffix, keeps
the primary key as "Id" and the display field as "Name", and returns lookup
columns as {"Id": ..., "Name": ...} objects. Services only ever see the
canonical snake_case names; translation happens here, once, at the adapter
boundary.
"""

import enum
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Generic, List, Mapping, Tuple, Type, TypeVar

from pydantic import BaseModel

from app.schemas.client import ClientRecord
from app.schemas.fee import FeeRecord
from app.schemas.payment import PaymentRecord

R = TypeVar("R", bound=BaseModel)


class FieldMap(Generic[R]):
    """Name mapping and value conversion for one record kind."""

    def __init__(
        self,
        kind: str,
        table: str,
        record_type: Type[R],
        names: Mapping[str, str],
        lookups: Tuple[str, ...] = (),
    ):
        self.kind = kind
        self.table = table
        self.record_type = record_type
        self.names = dict(names)
        self.lookups = lookups
        self._canonical = {wire: canonical for canonical, wire in self.names.items()}

    def wire_name(self, canonical: str) -> str:
        try:
            return self.names[canonical]
        except KeyError:
            raise KeyError(f"Unknown {self.kind} field: {canonical}") from None

    @property
    def wire_fields(self) -> List[str]:
        return list(self.names.values())

    def to_wire(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Canonical fields -> JSON-ready wire payload."""
        return {self.wire_name(name): _wire_value(value) for name, value in fields.items()}

    def from_wire(self, data: Mapping[str, Any]) -> R:
        """
        Wire payload -> canonical record. Unknown wire fields (system
        columns such as CreatedOn) are ignored; lookups are flattened to ids.
        Raises pydantic.ValidationError on malformed data.
        """
        canonical: Dict[str, Any] = {}
        for wire, value in data.items():
            name = self._canonical.get(wire)
            if name is None:
                continue
            if name in self.lookups and isinstance(value, Mapping):
                value = value.get("Id")
            canonical[name] = value
        return self.record_type.model_validate(canonical)


def _wire_value(value: Any) -> Any:
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, date):
        return value.isoformat()
    return value


CLIENT_FIELDS = FieldMap(
    kind="client",
    table="client_c",
    record_type=ClientRecord,
    names={
        "id": "Id",
        "name": "Name",
        "email": "email_c",
        "phone": "phone_c",
        "company": "company_c",
        "address": "address_c",
        "status": "status_c",
        "total_due": "total_due_c",
        "total_paid": "total_paid_c",
    },
)

FEE_FIELDS = FieldMap(
    kind="fee",
    table="fee_c",
    record_type=FeeRecord,
    names={
        "id": "Id",
        "client_id": "client_id_c",
        "description": "description_c",
        "note": "note_c",
        "amount": "amount_c",
        "due_date": "due_date_c",
        "category": "category_c",
        "is_recurring": "is_recurring_c",
        "status": "status_c",
    },
    lookups=("client_id",),
)

PAYMENT_FIELDS = FieldMap(
    kind="payment",
    table="payment_c",
    record_type=PaymentRecord,
    names={
        "id": "Id",
        "fee_id": "fee_id_c",
        "amount": "amount_c",
        "payment_date": "payment_date_c",
        "method": "method_c",
        "reference": "reference_c",
    },
    lookups=("fee_id",),
)
