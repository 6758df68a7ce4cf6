"""
Restaurant Ordering API: Token & Password Service Tests
==========================================================

What:  bcrypt hashing, JWT issue/verify and the login flow.
How:   AuthService is built from test_settings (bcrypt cost 4); login runs
       against mock_db_session.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import jwt
import pytest

from app.exceptions import InvalidLoginError, InvalidTokenError, ValidationError
from app.schemas.common import Principal


class TestPasswords:

    def test_hash_verifies(self, auth_service):
        digest = auth_service.hash_password("123456")
        assert digest != "123456"
        assert digest.startswith("$2")
        assert auth_service.verify_password("123456", digest)

    def test_wrong_password_fails(self, auth_service):
        digest = auth_service.hash_password("123456")
        assert not auth_service.verify_password("654321", digest)

    def test_malformed_digest_fails_instead_of_raising(self, auth_service):
        assert not auth_service.verify_password("123456", "not-a-bcrypt-digest")

    def test_same_password_hashes_differently(self, auth_service):
        assert auth_service.hash_password("pw") != auth_service.hash_password("pw")

    def test_overlong_password_is_rejected(self, auth_service):
        with pytest.raises(ValidationError):
            auth_service.hash_password("x" * 73)


class TestTokens:

    def test_round_trip(self, auth_service):
        token = auth_service.issue_token(Principal(id=7, username="johndoe"))
        assert auth_service.decode_token(token) == Principal(id=7, username="johndoe")

    def test_claims_include_expiry_one_hour_out(self, auth_service, test_settings):
        token = auth_service.issue_token(Principal(id=7, username="johndoe"))
        claims = jwt.decode(token, test_settings.jwt_secret, algorithms=["HS256"])
        assert claims["exp"] - claims["iat"] == 3600
        assert set(claims) == {"id", "username", "iat", "exp"}

    def test_expired_token_is_rejected(self, auth_service):
        token = auth_service.issue_token(
            Principal(id=7, username="johndoe"), expires_delta=timedelta(seconds=-5)
        )
        with pytest.raises(InvalidTokenError) as exc_info:
            auth_service.decode_token(token)
        assert exc_info.value.context["error"] == "expired"

    def test_foreign_signature_is_rejected(self, auth_service):
        forged = jwt.encode(
            {"id": 1, "username": "admin", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            "some-other-secret-of-sufficient-length-000",
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            auth_service.decode_token(forged)

    def test_garbage_is_rejected(self, auth_service):
        with pytest.raises(InvalidTokenError):
            auth_service.decode_token("abc.def.ghi")

    def test_claims_without_identity_are_rejected(self, auth_service, test_settings):
        token = jwt.encode(
            {"sub": "7", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            test_settings.jwt_secret,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            auth_service.decode_token(token)

    def test_token_without_expiry_is_rejected(self, auth_service, test_settings):
        token = jwt.encode({"id": 7, "username": "johndoe"}, test_settings.jwt_secret, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            auth_service.decode_token(token)


class TestLogin:

    @pytest.mark.asyncio
    async def test_valid_credentials_return_token(self, auth_service, mock_db_session):
        row = MagicMock(id=3, username="johndoe", password=auth_service.hash_password("123456"))
        mock_db_session.execute.return_value = MagicMock(first=MagicMock(return_value=row))

        token = await auth_service.login(mock_db_session, "johndoe", "123456")

        assert auth_service.decode_token(token) == Principal(id=3, username="johndoe")

    @pytest.mark.asyncio
    async def test_unknown_user(self, auth_service, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(first=MagicMock(return_value=None))

        with pytest.raises(InvalidLoginError) as exc_info:
            await auth_service.login(mock_db_session, "ghost", "123456")
        assert exc_info.value.message == "Invalid username or password"

    @pytest.mark.asyncio
    async def test_wrong_password(self, auth_service, mock_db_session):
        row = MagicMock(id=3, username="johndoe", password=auth_service.hash_password("123456"))
        mock_db_session.execute.return_value = MagicMock(first=MagicMock(return_value=row))

        with pytest.raises(InvalidLoginError):
            await auth_service.login(mock_db_session, "johndoe", "wrong")

    @pytest.mark.asyncio
    async def test_missing_fields_skip_the_lookup(self, auth_service, mock_db_session):
        with pytest.raises(InvalidLoginError):
            await auth_service.login(mock_db_session, "johndoe", None)
        mock_db_session.execute.assert_not_awaited()
