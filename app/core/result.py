"""
Operation results for the reconciliation services.

Every service operation returns either Success or Failure; store failures
are values, never exceptions. A Success that carries warnings is a partial
failure: the primary record was written but a dependent cascade (fee status
or client totals) was not, so derived data may be stale.
"""

import enum
from typing import Generic, List, Optional, TypeVar, Union
from pydantic import BaseModel, Field
from typing_extensions import TypeAliasType

T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    """Failure taxonomy shared by services and the HTTP layer"""
    NOT_FOUND = "not_found"
    READ_FAILED = "read_failed"
    WRITE_FAILED = "write_failed"
    CONFLICT = "conflict"
    PARTIAL_FAILURE = "partial_failure"


class CascadeStep(str, enum.Enum):
    """Secondary writes triggered by a fee or payment mutation"""
    FEE_STATUS = "fee_status"
    CLIENT_TOTALS = "client_totals"


class CascadeWarning(BaseModel):
    """A cascade step that failed after its primary write committed"""
    step: CascadeStep
    record_id: Optional[int] = Field(None, description="Fee or client the step targeted")
    detail: str


class Success(BaseModel, Generic[T]):
    value: T
    warnings: List[CascadeWarning] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True

    @property
    def is_partial_failure(self) -> bool:
        return bool(self.warnings)

    @property
    def kind(self) -> Optional[ErrorKind]:
        return ErrorKind.PARTIAL_FAILURE if self.warnings else None

    def failed_steps(self) -> List[CascadeStep]:
        return [w.step for w in self.warnings]


class Failure(BaseModel):
    kind: ErrorKind
    detail: str

    @property
    def ok(self) -> bool:
        return False

    @property
    def is_partial_failure(self) -> bool:
        return False


# Subscriptable alias: Result[FeeRecord] == Union[Success[FeeRecord], Failure]
Result = TypeAliasType("Result", Union[Success[T], Failure], type_params=(T,))


def not_found(detail: str) -> Failure:
    return Failure(kind=ErrorKind.NOT_FOUND, detail=detail)


def write_failed(detail: str) -> Failure:
    return Failure(kind=ErrorKind.WRITE_FAILED, detail=detail)


def read_failed(detail: str) -> Failure:
    return Failure(kind=ErrorKind.READ_FAILED, detail=detail)


def conflict(detail: str) -> Failure:
    return Failure(kind=ErrorKind.CONFLICT, detail=detail)
