from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    """Creation time assigned by the repository, never by the client."""

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
