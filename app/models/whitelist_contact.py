from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class WhitelistContact(Base, TimestampMixin):
    __tablename__ = "whitelist"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    phone_number: Mapped[str | None] = mapped_column(String(32), nullable=True, unique=True)
    contact_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    relationship: Mapped[str | None] = mapped_column(String(64), nullable=True)

    def __repr__(self):
        return f"<WhitelistContact(id={self.id}, phone_number='{self.phone_number}')>"
