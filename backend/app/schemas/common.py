"""
Restaurant Ordering API: Response Envelopes
==============================================

What:  The `{status, ...}` wrappers every endpoint returns.
Why:   Clients get one shape per outcome, whatever the entity:

    | Outcome            | HTTP | Body                                          |
    |--------------------|------|-----------------------------------------------|
    | collection         | 200  | {status:"ok", count, data:[...], total?, page?, limit?} |
    | single             | 200  | {status:"ok", data:{...}}                     |
    | created            | 201  | {status:"ok", id, ...echo}                    |
    | message            | 200  | {status:"ok", message}                        |
    | error              | 4xx/5xx | {status, message, detail?}                 |

List routes are declared with `response_model_exclude_unset=True`, so the
pagination fields only appear when ListEnvelope.build() sets them.
"""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

RowT = TypeVar("RowT")


class ListEnvelope(BaseModel, Generic[RowT]):
    status: str = "ok"
    count: int = Field(description="Number of rows in `data`")
    data: List[RowT]
    total: Optional[int] = Field(default=None, description="Rows in the table (paginated calls only)")
    page: Optional[int] = Field(default=None, description="1-based page number (paginated calls only)")
    limit: Optional[int] = Field(default=None, description="Page size in effect (paginated calls only)")

    @classmethod
    def build(cls, rows: list, total: Optional[int] = None, page: Optional[int] = None,
              limit: Optional[int] = None):
        """
        Construct an envelope, marking pagination fields as set only when a
        limit was in effect. `status` is passed explicitly so it survives
        exclude_unset serialization.
        """
        fields = {"status": "ok", "count": len(rows), "data": rows}
        if limit is not None:
            fields.update(total=total, page=page, limit=limit)
        return cls(**fields)


class ItemEnvelope(BaseModel, Generic[RowT]):
    status: str = "ok"
    data: RowT


class CreatedResponse(BaseModel):
    status: str = "ok"
    id: int = Field(description="Primary key of the new row")


class MessageResponse(BaseModel):
    status: str = "ok"
    message: str


class ErrorResponse(BaseModel):
    """
    What:  Error envelope shared by every handler in main.py.

    status values:
        bad_request → 400, error → 401/500, not_found → 404, conflict → 409
    `detail` is only present on 500s when EXPOSE_ERROR_DETAIL is enabled.
    """
    status: str = Field(description="bad_request, error, not_found or conflict")
    message: str = Field(description="Human-readable error description")
    detail: Optional[str] = Field(default=None, description="Driver error text (debug only)")


class Principal(BaseModel):
    """The authenticated caller, rebuilt from verified token claims on every request."""
    id: int
    username: str


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


class PingResponse(BaseModel):
    status: str = "ok"
    time: datetime = Field(description="Database server time")


# Shared error documentation for route decorators
ERROR_RESPONSES = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    401: {"description": "Missing, malformed or invalid bearer token", "model": ErrorResponse},
    404: {"description": "Row not found", "model": ErrorResponse},
    500: {"description": "Database or server error", "model": ErrorResponse},
}
