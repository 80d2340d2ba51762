"""Fee Model"""

from sqlalchemy import Boolean, Column, Date, Integer, Numeric, String, Text

from app.models.base import BaseModel, enum_column_type
from app.models.enums import FeeCategory, FeeStatus


class Fee(BaseModel):
    """
    A billable obligation owed by a client.

    client_id is indexed but not a foreign key: deleting a client leaves
    its fees in place.
    """
    __tablename__ = "fees"

    client_id = Column(Integer, nullable=False, index=True)
    description = Column(String(500), nullable=False)
    note = Column(Text, nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    due_date = Column(Date, nullable=False, index=True)
    category = Column(
        enum_column_type(FeeCategory, "fee_category"),
        default=FeeCategory.CONSULTING,
        nullable=False,
    )
    is_recurring = Column(Boolean, default=False, nullable=False)
    status = Column(
        enum_column_type(FeeStatus, "fee_status"),
        default=FeeStatus.PENDING,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Fee {self.description} {self.amount} - {self.status}>"
