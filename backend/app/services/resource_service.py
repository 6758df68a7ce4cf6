"""
Restaurant Ordering API: Generic Resource Service
====================================================

What:  The list / get / create / partial-update / delete contract shared by
       every entity router, plus the input parsing helpers they rely on.
Why:   Six tables expose the same five operations. Writing the contract once
       keeps pagination, id validation, the partial-update rules and the
       database error mapping identical everywhere.
How:   Entity services subclass ResourceService and declare their model,
       read projection, label and column sets. Hooks cover the few places
       where an entity differs (joined projection, derived columns, enum
       checks).

Contract summary:
    list    → {status, count, data, total?, page?, limit?}
              COUNT(*) is only issued when a limit is in effect.
    get     → row, or NotFoundError ("<Entity> not found")
    create  → required fields must be truthy, then one INSERT; returns id
    update  → empty Partial Update Set is a 400 before the database is
              touched; zero affected rows is a 404; updated_at always bumped
    delete  → physical DELETE by primary key; zero affected rows is a 404

Every statement is built with SQLAlchemy expressions, so values always
travel as bound parameters. Raw path values never reach SQL text.
"""

import logging
import re
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, Iterable, Optional, Set, Tuple, Type

from pydantic import BaseModel
from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, DatabaseError, NotFoundError, ValidationError
from app.models.timestamps import utcnow
from app.schemas.common import ListEnvelope

logger = logging.getLogger(__name__)

# Leading integer, the way query strings are read from the wire ("10", " 5", "20abc")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
# Path ids must be whole positive integers ("12", not "12abc" or "1.5")
_WHOLE_ID = re.compile(r"^\s*\+?(\d+)\s*$")
# Integer primary keys and offsets stay inside a signed 32-bit column
MAX_ROW_ID = 2**31 - 1
# SQLSTATE for unique_violation; other integrity failures are bad input
UNIQUE_VIOLATION = "23505"


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Parse the leading integer of a query value; None when there is none."""
    if raw is None:
        return None
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


def parse_id(raw: str, message: str = "id must be a number") -> int:
    """
    Validate a path identifier.

    Every router uses this one policy: the id must be a positive whole
    number, otherwise 400 before any query runs.
    """
    match = _WHOLE_ID.match(str(raw))
    if not match or int(match.group(1)) <= 0:
        raise ValidationError(message, field="id", context={"value": raw})
    return int(match.group(1))


@dataclass(frozen=True)
class PageRequest:
    """
    Parsed `limit` / `page` query parameters.

    limit=None means "no pagination requested": every row is returned and
    the response carries no total/page/limit.
    """

    limit: Optional[int] = None
    page: int = 1

    @property
    def paginated(self) -> bool:
        return self.limit is not None

    @property
    def offset(self) -> int:
        if self.limit is None:
            return 0
        return min((self.page - 1) * self.limit, MAX_ROW_ID)

    @classmethod
    def from_query(
        cls,
        limit: Optional[str],
        page: Optional[str],
        strict: bool = False,
        max_page_size: int = 100,
    ) -> "PageRequest":
        """
        Two router families exist:

            lenient (strict=False): a non-numeric or non-positive limit is
                treated as "no limit requested".
            strict (strict=True): a limit that was sent but is non-numeric
                or non-positive is a 400 "limit must be a positive number".

        Either way the limit is capped at max_page_size, and a bad page
        silently becomes 1. A page past the end gives an empty page.
        """
        parsed_limit = parse_int(limit)
        if parsed_limit is None or parsed_limit <= 0:
            if strict and limit is not None:
                raise ValidationError(
                    "limit must be a positive number", field="limit", context={"value": limit}
                )
            parsed_limit = None
        else:
            parsed_limit = min(parsed_limit, max_page_size)

        parsed_page = parse_int(page)
        if parsed_page is None or parsed_page <= 0:
            parsed_page = 1

        return cls(limit=parsed_limit, page=parsed_page)


def require_fields(values: Dict[str, Any], names: Iterable[str]) -> None:
    """
    Reject a create body when any required field is falsy.

    None, "" and 0 all count as missing, so a zero price or quantity is
    rejected the same way an absent one is.
    """
    for name in names:
        if not values.get(name):
            raise ValidationError("Missing required fields", field=name)


def build_update_set(body: BaseModel, mutable_columns: Iterable[str]) -> Dict[str, Any]:
    """
    Build the Partial Update Set: every mutable column the caller actually
    sent. An explicit JSON null is a value (it clears the column) for nullable
    columns; an omitted field is left alone.
    """
    allowed = set(mutable_columns)
    return {
        column: value
        for column, value in body.model_dump(exclude_unset=True).items()
        if column in allowed
    }


def is_unique_violation(error: IntegrityError) -> bool:
    """asyncpg reports a SQLSTATE; sqlite3 only names the constraint in its message."""
    code = getattr(error.orig, "sqlstate", None) or getattr(error.orig, "pgcode", None)
    if code:
        return code == UNIQUE_VIOLATION
    return "UNIQUE" in str(error.orig).upper()


@asynccontextmanager
async def database_errors(label: str, action: str, **context: Any) -> AsyncIterator[None]:
    """
    Translate driver failures at the service boundary.

    Unique violation → ConflictError (409); any other IntegrityError (NOT
    NULL, foreign key, CHECK) → ValidationError (400); any other
    SQLAlchemyError → DatabaseError (500). Application exceptions raised
    inside the block pass through untouched. Nothing is retried.
    """
    try:
        yield
    except IntegrityError as e:
        logger.warning("Integrity violation during %s %s %s: %s", action, label, context, e.orig)
        if is_unique_violation(e):
            raise ConflictError(
                message=f"{label} conflicts with existing data",
                context={"action": action, "detail": str(e.orig), **context},
            )
        raise ValidationError(
            f"{label} violates a data constraint",
            context={"action": action, "detail": str(e.orig), **context},
        )
    except SQLAlchemyError as e:
        logger.error("Database error during %s %s %s: %s", action, label, context, e, exc_info=True)
        raise DatabaseError(context={"action": action, "detail": str(e), **context})


class ResourceService:
    """
    Base class for entity services.

    Subclasses set:
        model:            ORM class (must have an integer `id` primary key)
        schema:           pydantic read model used for every returned row
        label:            entity name used in messages ("Menu")
        columns:          explicit read projection (never SELECT *)
        required_fields:  fields that must be truthy on create
        insert_columns:   fields copied from a create body into the INSERT
        mutable_columns:  fields a partial update may set

    Explicit nulls for NOT NULL columns of the model are rejected on update.
    """

    model: Type[Any]
    schema: Type[BaseModel]
    label: str = "Resource"
    columns: Tuple[Any, ...] = ()
    required_fields: Tuple[str, ...] = ()
    insert_columns: Tuple[str, ...] = ()
    mutable_columns: Tuple[str, ...] = ()

    # ── Hooks ─────────────────────────────────────────────────────────────

    def select_query(self) -> Select:
        """Projection used by list and get; override to add joins."""
        return select(*self.columns)

    def prepare_insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and shape create values. Runs after required-field checks."""
        return {column: values.get(column) for column in self.insert_columns}

    def validate_changes(self, changes: Dict[str, Any]) -> None:
        """Per-entity checks on a Partial Update Set (enums, ranges)."""

    def derived_columns(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Columns computed from the update set, written in the same statement."""
        return {}

    def non_nullable_columns(self) -> Set[str]:
        return {column.name for column in self.model.__table__.columns if not column.nullable}

    def _check_id(self, item_id: int) -> None:
        # Larger ids cannot exist and would overflow the driver's integer binding
        if item_id > MAX_ROW_ID:
            raise NotFoundError(resource=self.label, resource_id=item_id)

    # ── Operations ────────────────────────────────────────────────────────

    async def list(self, db: AsyncSession, page: PageRequest) -> ListEnvelope:
        """
        Fetch one page (or every row), then the table count when paginating.

        The two statements run one after the other on the same session.
        Rows are ordered by id so consecutive pages do not overlap.
        """
        query = self.select_query().order_by(self.model.id)
        if page.paginated:
            query = query.limit(page.limit).offset(page.offset)

        total: Optional[int] = None
        async with database_errors(self.label, "list"):
            result = await db.execute(query)
            rows = [self.schema.model_validate(dict(row)) for row in result.mappings().all()]
            if page.paginated:
                count_result = await db.execute(select(func.count()).select_from(self.model))
                total = count_result.scalar_one()

        return ListEnvelope[self.schema].build(
            rows,
            total=total,
            page=page.page if page.paginated else None,
            limit=page.limit,
        )

    async def get(self, db: AsyncSession, item_id: int) -> BaseModel:
        self._check_id(item_id)
        async with database_errors(self.label, "get", id=item_id):
            result = await db.execute(self.select_query().where(self.model.id == item_id))
            row = result.mappings().first()

        if row is None:
            raise NotFoundError(resource=self.label, resource_id=item_id)
        return self.schema.model_validate(dict(row))

    async def create(self, db: AsyncSession, body: BaseModel) -> int:
        values = body.model_dump()
        require_fields(values, self.required_fields)
        return await self.insert(db, self.prepare_insert(values))

    async def insert(self, db: AsyncSession, values: Dict[str, Any]) -> int:
        """One INSERT; returns the new primary key."""
        async with database_errors(self.label, "create"):
            row = self.model(**values)
            db.add(row)
            await db.flush()
            await db.commit()

        logger.info("%s %s created", self.label, row.id)
        return row.id

    async def update(self, db: AsyncSession, item_id: int, changes: Dict[str, Any]) -> None:
        """
        Apply a Partial Update Set.

        Raises:
            ValidationError: empty set or a rejected value (no statement runs)
            NotFoundError:   no row with this id
        """
        if not changes:
            raise ValidationError("No fields to update")
        self.validate_changes(changes)
        for column in sorted(self.non_nullable_columns() & changes.keys()):
            if changes[column] is None:
                raise ValidationError(f"{column} must not be null", field=column)
        self._check_id(item_id)

        values = {**changes, **self.derived_columns(changes), "updated_at": utcnow()}
        statement = (
            update(self.model)
            .where(self.model.id == item_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        async with database_errors(self.label, "update", id=item_id):
            result = await db.execute(statement)
            await db.commit()

        if result.rowcount == 0:
            raise NotFoundError(resource=self.label, resource_id=item_id)
        logger.info("%s %s updated: %s", self.label, item_id, sorted(changes))

    async def delete(self, db: AsyncSession, item_id: int) -> None:
        """Physical delete; a second call for the same id is a 404."""
        self._check_id(item_id)
        statement = (
            delete(self.model)
            .where(self.model.id == item_id)
            .execution_options(synchronize_session=False)
        )
        async with database_errors(self.label, "delete", id=item_id):
            result = await db.execute(statement)
            await db.commit()

        if result.rowcount == 0:
            raise NotFoundError(resource=self.label, resource_id=item_id)
        logger.info("%s %s deleted", self.label, item_id)
