"""
Restaurant Ordering API: Token & Password Service
====================================================

What:  Password hashing (bcrypt), bearer token issue/verify (PyJWT) and the
       login flow that ties them together.
Why:   Both primitives need configuration (cost factor, secret, expiry), so
       they live on one object built from Settings in create_app() and kept
       on app.state. Routes and the auth gate fetch it from there.
How:
    hash_password / verify_password → bcrypt, cost = BCRYPT_ROUNDS
    issue_token / decode_token      → HS256 JWT with {id, username, iat, exp}
    login                           → lookup by username, verify, issue

Token lifetime:
    exp = iat + JWT_EXPIRE_MINUTES. There is no refresh and no revocation;
    a token stays valid until it expires.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.exceptions import InvalidLoginError, InvalidTokenError, ValidationError
from app.models.customer import Customer
from app.schemas.common import Principal
from app.services.resource_service import database_errors

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class AuthService:
    """Stateless apart from its configuration; one instance per app."""

    def __init__(self, config: Settings):
        self._config = config

    # ── Passwords ─────────────────────────────────────────────────────────

    def hash_password(self, plaintext: str) -> str:
        encoded = plaintext.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"password must be at most {MAX_PASSWORD_BYTES} bytes", field="password"
            )
        salt = bcrypt.gensalt(rounds=self._config.bcrypt_rounds)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify_password(self, plaintext: str, digest: str) -> bool:
        """False for a wrong password, an over-long one, or a digest bcrypt cannot parse."""
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
        except ValueError:
            return False

    # ── Tokens ────────────────────────────────────────────────────────────

    def issue_token(self, principal: Principal, expires_delta: Optional[timedelta] = None) -> str:
        issued_at = datetime.now(timezone.utc)
        lifetime = expires_delta or timedelta(minutes=self._config.jwt_expire_minutes)
        claims = {
            "id": principal.id,
            "username": principal.username,
            "iat": issued_at,
            "exp": issued_at + lifetime,
        }
        return jwt.encode(claims, self._config.jwt_secret, algorithm=self._config.jwt_algorithm)

    def decode_token(self, token: str) -> Principal:
        """
        Verify signature and expiry, then rebuild the Principal from claims.

        Raises:
            InvalidTokenError: bad signature, expired, or claims missing/mistyped
        """
        try:
            claims = jwt.decode(
                token,
                self._config.jwt_secret,
                algorithms=[self._config.jwt_algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidTokenError(context={"error": "expired"})
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(context={"error": type(e).__name__})

        try:
            return Principal(id=claims["id"], username=claims["username"])
        except (KeyError, PydanticValidationError):
            raise InvalidTokenError(context={"error": "unexpected claims"})

    # ── Login ─────────────────────────────────────────────────────────────

    async def login(self, db: AsyncSession, username: Optional[str], password: Optional[str]) -> str:
        """
        Exchange credentials for a token.

        Unknown username and wrong password raise the same InvalidLoginError,
        so the response does not reveal which accounts exist.
        """
        if not username or not password:
            raise InvalidLoginError(context={"reason": "missing credentials"})

        async with database_errors("Customer", "login"):
            result = await db.execute(
                select(Customer.id, Customer.username, Customer.password).where(
                    Customer.username == username
                )
            )
            row = result.first()

        if row is None or not self.verify_password(password, row.password):
            logger.warning("Failed login for username=%r", username)
            raise InvalidLoginError(context={"username": username})

        logger.info("Customer %s logged in", row.id)
        return self.issue_token(Principal(id=row.id, username=row.username))
