"""
Restaurant Ordering API: Order SQLAlchemy Model
==================================================

What:  ORM model for `tbl_orders`: one menu item, in some quantity, for one
       customer.
Why:   `price` is a snapshot of the menu price at order time and
       `total_price = quantity * price`; both are written once by the
       server and never accepted from the caller.
"""

from sqlalchemy import ForeignKey, Integer, Numeric, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.timestamps import TimestampMixin


class Order(TimestampMixin, Base):
    __tablename__ = "tbl_orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tbl_customers.id"), nullable=False, index=True
    )
    restaurant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tbl_restaurants.id"), nullable=False
    )
    menu_id: Mapped[int] = mapped_column(Integer, ForeignKey("tbl_menus.id"), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    total_price: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default="pending", server_default=text("'pending'")
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, customer_id={self.customer_id}, status='{self.status}')>"
