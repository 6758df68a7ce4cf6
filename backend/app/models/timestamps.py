"""
Restaurant Ordering API: Shared Timestamp Columns
====================================================

What:  created_at / updated_at columns shared by every table.
Why:   Every entity carries both; update statements always bump updated_at.
How:   Declarative mixin. Python-side defaults keep microsecond precision
       (SQLite's CURRENT_TIMESTAMP only has seconds); the server default
       covers rows inserted outside the ORM.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, func
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
