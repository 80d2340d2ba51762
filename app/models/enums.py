"""Centralized Enum Definitions"""

import enum


# Clients
class ClientStatus(str, enum.Enum):
    """Client lifecycle status"""
    ACTIVE = "active"
    INACTIVE = "inactive"


# Fees
class FeeStatus(str, enum.Enum):
    """
    Fee lifecycle status.

    OVERDUE is normally derived at read time from PENDING + due date; it is
    only stored when a caller sets it explicitly.
    """
    PENDING = "pending"
    OVERDUE = "overdue"
    PAID = "paid"


# Statuses that still count towards a client's amount due
UNPAID_FEE_STATUSES = frozenset({FeeStatus.PENDING, FeeStatus.OVERDUE})


class FeeCategory(str, enum.Enum):
    """Fee categories offered by the fee form"""
    CONSULTING = "Consulting"
    LICENSE = "License"
    SETUP = "Setup"
    TRAINING = "Training"
    MAINTENANCE = "Maintenance"
    DESIGN = "Design"
    SUPPORT = "Support"
    OTHER = "Other"


# Payments
class PaymentMethod(str, enum.Enum):
    """How a payment was received"""
    BANK_TRANSFER = "Bank Transfer"
    CREDIT_CARD = "Credit Card"
    CHECK = "Check"
    CASH = "Cash"
    PAYPAL = "PayPal"
    OTHER = "Other"
