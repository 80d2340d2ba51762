"""Base Models and Mixins for DRY principles"""

from sqlalchemy import Column, DateTime, Enum, Integer

from app.database import Base
from app.utils.time import get_utc_now


class BaseModel(Base):
    """
    Base model class with common fields for all models.

    Provides:
    - Integer primary key (record ids are plain integers end to end)
    - created_at timestamp
    - updated_at timestamp
    """
    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    created_at = Column(DateTime, default=get_utc_now, nullable=False)
    updated_at = Column(DateTime, default=get_utc_now, onupdate=get_utc_now, nullable=False)


def enum_column_type(enum_cls, name: str):
    """Enum column storing member values ("Bank Transfer"), not member names."""
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )
