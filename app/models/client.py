"""Client Model"""

from sqlalchemy import Column, String, Numeric

from app.models.base import BaseModel, enum_column_type
from app.models.enums import ClientStatus


class Client(BaseModel):
    """
    A billed customer.

    total_due / total_paid are derived from the client's fees and are only
    ever written by the balance reconciler.
    """
    __tablename__ = "clients"

    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=True, index=True)
    phone = Column(String(50), nullable=True)
    company = Column(String(255), nullable=True)
    address = Column(String(500), nullable=True)
    status = Column(
        enum_column_type(ClientStatus, "client_status"),
        default=ClientStatus.ACTIVE,
        nullable=False,
        index=True,
    )

    total_due = Column(Numeric(12, 2), default=0, nullable=False)
    total_paid = Column(Numeric(12, 2), default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<Client {self.name} due={self.total_due} paid={self.total_paid}>"
