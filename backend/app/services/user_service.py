"""
Restaurant Ordering API: User Service
========================================

What:  /api/users business rules on top of the generic resource contract.
Why:   Users are the only entity with secrets and uniqueness rules:
         - passwords are bcrypt-hashed on create AND on update
         - the password column is never part of a read projection
         - duplicate username/email is a 409 checked before the INSERT
How:   The hashing primitives come from AuthService, passed in per call by
       the route (it lives on app.state, configured with BCRYPT_ROUNDS).
"""

import logging
from typing import Any, Dict

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, ValidationError
from app.models.customer import Customer
from app.schemas.user import UserCreate, UserOut
from app.services.auth_service import AuthService
from app.services.resource_service import ResourceService, database_errors, require_fields

logger = logging.getLogger(__name__)

PROFILE_COLUMNS = ("username", "firstname", "fullname", "lastname", "address", "phone", "email")


class UserService(ResourceService):
    model = Customer
    schema = UserOut
    label = "User"
    # No Customer.password here: the digest never leaves the service
    columns = (
        Customer.id,
        Customer.username,
        Customer.firstname,
        Customer.fullname,
        Customer.lastname,
        Customer.address,
        Customer.phone,
        Customer.email,
        Customer.created_at,
        Customer.updated_at,
    )
    required_fields = ("username", "password")
    insert_columns = PROFILE_COLUMNS
    mutable_columns = PROFILE_COLUMNS + ("password",)

    async def register(self, db: AsyncSession, body: UserCreate, auth: AuthService) -> int:
        """
        Create a customer account.

        Raises:
            ValidationError: username or password missing/empty
            ConflictError:   username (or the given email) already taken
        """
        values = body.model_dump()
        require_fields(values, self.required_fields)

        taken = Customer.username == values["username"]
        if values.get("email"):
            taken = or_(taken, Customer.email == values["email"])

        async with database_errors(self.label, "create"):
            result = await db.execute(select(Customer.id).where(taken).limit(1))
            existing = result.scalar_one_or_none()

        if existing is not None:
            logger.info("Registration rejected, username/email in use: %r", values["username"])
            raise ConflictError("Username or email already exists")

        row = self.prepare_insert(values)
        row["password"] = auth.hash_password(values["password"])
        return await self.insert(db, row)

    def hash_changes(self, changes: Dict[str, Any], auth: AuthService) -> Dict[str, Any]:
        """Replace a plaintext password in an update set with its digest."""
        if "password" not in changes:
            return changes
        if not changes["password"]:
            raise ValidationError("password must not be empty", field="password")
        return {**changes, "password": auth.hash_password(changes["password"])}


user_service = UserService()
