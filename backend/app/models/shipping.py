"""ORM model for `tbl_shippings`: delivery details for one order."""

from sqlalchemy import ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.timestamps import TimestampMixin


class Shipping(TimestampMixin, Base):
    __tablename__ = "tbl_shippings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tbl_orders.id"), nullable=False, index=True
    )
    receiver_name: Mapped[str] = mapped_column(String(200), nullable=False)
    shipping_address: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    shipping_status: Mapped[str] = mapped_column(
        String(50), nullable=False, default="pending", server_default=text("'pending'")
    )

    def __repr__(self) -> str:
        return f"<Shipping(id={self.id}, order_id={self.order_id}, status='{self.shipping_status}')>"
