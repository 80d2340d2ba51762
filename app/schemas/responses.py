"""Standardized API Response Schemas"""

from typing import Generic, List, TypeVar
from pydantic import BaseModel

from app.core.result import CascadeWarning


T = TypeVar('T')


class SuccessResponse(BaseModel, Generic[T]):
    """
    Standard success response envelope.

    A non-empty warnings list means the record was saved but a follow-up
    update (fee status, client totals) did not go through.

    Example:
        {
            "success": true,
            "data": {...},
            "message": "Saved with reconciliation warnings",
            "warnings": [
                {"step": "client_totals", "record_id": 3, "detail": "..."}
            ]
        }
    """
    success: bool = True
    data: T
    message: str = "Operation successful"
    warnings: List[CascadeWarning] = []


class ErrorDetail(BaseModel):
    """Error details structure"""
    code: str
    message: str


class ErrorResponse(BaseModel):
    """
    Standard error response envelope.

    Example:
        {
            "success": false,
            "error": {
                "code": "not_found",
                "message": "Fee 123 not found"
            }
        }
    """
    success: bool = False
    error: ErrorDetail
