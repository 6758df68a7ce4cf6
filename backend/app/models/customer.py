"""
Restaurant Ordering API: Customer SQLAlchemy Model
=====================================================

What:  ORM model for `tbl_customers`, the users who log in and place orders.
Why:   Login looks customers up by username; /api/users manages them.

Security:
    `password` holds a bcrypt digest, never plaintext, and is left out of
    every read projection (see CustomerService.columns).
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.timestamps import TimestampMixin


class Customer(TimestampMixin, Base):
    __tablename__ = "tbl_customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Uniqueness is checked before insert (409) and enforced by the index
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    firstname: Mapped[Optional[str]] = mapped_column(String(100))
    fullname: Mapped[Optional[str]] = mapped_column(String(200))
    lastname: Mapped[Optional[str]] = mapped_column(String(100))
    address: Mapped[Optional[str]] = mapped_column(String(255))
    phone: Mapped[Optional[str]] = mapped_column(String(20))
    email: Mapped[Optional[str]] = mapped_column(String(255), unique=True)

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, username='{self.username}')>"
