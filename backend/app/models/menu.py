"""
Restaurant Ordering API: Menu SQLAlchemy Model
=================================================

What:  ORM model for `tbl_menus`, one priced dish of one restaurant.
Why:   Order creation reads `price` from here, so the menu row is the single
       source of truth for what an order costs.

Price storage:
    NUMERIC(10, 2) in the database, returned as float (asdecimal=False) so
    JSON responses carry numbers rather than decimal strings.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.timestamps import TimestampMixin


class Menu(TimestampMixin, Base):
    __tablename__ = "tbl_menus"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    restaurant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tbl_restaurants.id"), nullable=False, index=True
    )
    menu_name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<Menu(id={self.id}, name='{self.menu_name}', price={self.price})>"
