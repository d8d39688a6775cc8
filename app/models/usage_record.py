from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class UsageRecord(Base, TimestampMixin):
    __tablename__ = "usage_records"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    usage_type: Mapped[str] = mapped_column(String(32), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 4), nullable=False)
    cost: Mapped[Decimal] = mapped_column(Numeric(12, 4), nullable=False)
    billing_period: Mapped[str] = mapped_column(String(7), nullable=False, index=True)

    def __repr__(self):
        return f"<UsageRecord(id={self.id}, user_id='{self.user_id}', usage_type='{self.usage_type}', cost={self.cost})>"
