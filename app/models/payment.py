"""Payment Model"""

from sqlalchemy import Column, Date, Integer, Numeric, String

from app.models.base import BaseModel, enum_column_type
from app.models.enums import PaymentMethod


class Payment(BaseModel):
    """Money received against a single fee."""
    __tablename__ = "payments"

    # Not a foreign key: a payment may outlive a deleted fee
    fee_id = Column(Integer, nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    payment_date = Column(Date, nullable=False, index=True)
    method = Column(
        enum_column_type(PaymentMethod, "payment_method"),
        default=PaymentMethod.BANK_TRANSFER,
        nullable=False,
    )
    reference = Column(String(255), nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Payment fee={self.fee_id} {self.amount} via {self.method}>"
