"""
Restaurant Ordering API: Payment SQLAlchemy Model
====================================================

What:  ORM model for `tbl_payments`.

Lifecycle:
    payment_status is 'unpaid' or 'paid'. paid_at is derived, never sent by
    the caller: it is set to the current time whenever the status becomes
    'paid' and cleared whenever it becomes anything else.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.timestamps import TimestampMixin

PAYMENT_METHODS = ("cash", "CQ_code", "prompay")
PAYMENT_STATUSES = ("paid", "unpaid")


class Payment(TimestampMixin, Base):
    __tablename__ = "tbl_payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tbl_orders.id"), nullable=False, index=True
    )
    payment_method: Mapped[str] = mapped_column(String(20), nullable=False)
    payment_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="unpaid", server_default=text("'unpaid'")
    )
    amount: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    paid_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    def __repr__(self) -> str:
        return f"<Payment(id={self.id}, order_id={self.order_id}, status='{self.payment_status}')>"
