"""Models Package - Export all models for easy imports"""

from app.models.base import BaseModel
from app.models.enums import *
from app.models.client import Client
from app.models.fee import Fee
from app.models.payment import Payment


__all__ = [
    # Base classes
    "BaseModel",
    # Enums
    "ClientStatus",
    "FeeStatus",
    "FeeCategory",
    "PaymentMethod",
    "UNPAID_FEE_STATUSES",
    # Models
    "Client",
    "Fee",
    "Payment",
]
