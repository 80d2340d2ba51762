"""API Dependencies"""

from typing import Any, Optional

from fastapi import Request, status

from app.core.result import ErrorKind, Failure, Result
from app.schemas.responses import SuccessResponse
from app.store.base import RecordStore

PARTIAL_FAILURE_MESSAGE = "Saved with reconciliation warnings"

FAILURE_STATUS = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.READ_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.WRITE_FAILED: status.HTTP_502_BAD_GATEWAY,
}


class ResultError(Exception):
    """Raised by endpoints for a failed service result; rendered by main."""

    def __init__(self, failure: Failure):
        super().__init__(failure.detail)
        self.failure = failure

    @property
    def status_code(self) -> int:
        return FAILURE_STATUS.get(self.failure.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def get_store(request: Request) -> RecordStore:
    """
    Record store built at startup.

    Tests replace this dependency with an isolated store.
    """
    store: Optional[RecordStore] = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Record store not initialized")
    return store


def respond(result: Result[Any], message: str = "Operation successful") -> SuccessResponse:
    """Wrap a service result in the response envelope or raise ResultError."""
    if isinstance(result, Failure):
        raise ResultError(result)
    if result.is_partial_failure:
        message = PARTIAL_FAILURE_MESSAGE
    return SuccessResponse(data=result.value, message=message, warnings=result.warnings)
