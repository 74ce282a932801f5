"""
Postboard Backend — User Service Unit Tests
=============================================

What:  Tests for registration, login and logout handlers.
How:   The credential store is patched with AsyncMocks, so these tests check
       the handler logic alone: validation, normalization, hashing and error
       translation.

What we test:
    ✅ Registration returns a sanitized view and stores a hash, not the password
    ✅ Email and username are normalized before the store sees them
    ✅ Missing/blank fields raise ValidationError without touching the store
    ✅ Existing account and constraint races both raise ConflictError
    ✅ Other store failures raise InternalError with a generic message
    ✅ Login distinguishes unknown email (NotFoundError) from wrong password (AuthError)
    ✅ Logout only checks existence
"""

from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from postboard.exceptions import (
    AuthError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from postboard.schemas.user import LoginRequest, LogoutRequest, RegisterRequest
from postboard.security import hash_password, verify_password
from postboard.services.user_service import UserService


def make_user(email="hassan@mail.com", username="hassan", password="secret1"):
    user = MagicMock()
    user.id = uuid4()
    user.email = email
    user.username = username
    user.password_hash = hash_password(password)
    return user


class TestRegisterUser:
    """Tests for UserService.register_user."""

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_register_success_returns_sanitized_user(self, mock_db_session):
        created = make_user()
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email_or_username = AsyncMock(return_value=None)
            mock_store.create = AsyncMock(return_value=created)

            result = await self.service.register_user(
                mock_db_session,
                RegisterRequest(username="hassan", email="hassan@mail.com", password="secret1"),
            )

        assert result.message == "User registered successfully"
        assert result.user.id == created.id
        assert result.user.email == "hassan@mail.com"
        assert "password" not in result.model_dump()["user"]

    @pytest.mark.asyncio
    async def test_register_normalizes_email_and_username(self, mock_db_session):
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email_or_username = AsyncMock(return_value=None)
            mock_store.create = AsyncMock(return_value=make_user())

            await self.service.register_user(
                mock_db_session,
                RegisterRequest(username="  Hassan ", email=" Hassan@Mail.com ", password="secret1"),
            )

            mock_store.find_by_email_or_username.assert_awaited_once_with(
                mock_db_session, "hassan@mail.com", "hassan"
            )
            kwargs = mock_store.create.await_args.kwargs
            assert kwargs["email"] == "hassan@mail.com"
            assert kwargs["username"] == "hassan"

    @pytest.mark.asyncio
    async def test_register_stores_hash_not_plaintext(self, mock_db_session):
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email_or_username = AsyncMock(return_value=None)
            mock_store.create = AsyncMock(return_value=make_user())

            await self.service.register_user(
                mock_db_session,
                RegisterRequest(username="hassan", email="hassan@mail.com", password="secret1"),
            )

            stored = mock_store.create.await_args.kwargs["password_hash"]
            assert stored != "secret1"
            assert verify_password("secret1", stored)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"email": "a@b.com", "password": "secret1"},
        {"username": "hassan", "password": "secret1"},
        {"username": "hassan", "email": "a@b.com"},
        {"username": "   ", "email": "a@b.com", "password": "secret1"},
        {"username": "hassan", "email": "", "password": "secret1"},
    ])
    async def test_register_missing_field_raises_validation_error(self, mock_db_session, body):
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email_or_username = AsyncMock()
            mock_store.create = AsyncMock()

            with pytest.raises(ValidationError, match="All fields are required"):
                await self.service.register_user(mock_db_session, RegisterRequest(**body))

            mock_store.find_by_email_or_username.assert_not_awaited()
            mock_store.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_register_short_password_rejected(self, mock_db_session):
        with pytest.raises(ValidationError, match="Password must be between 6 and 50"):
            await self.service.register_user(
                mock_db_session,
                RegisterRequest(username="hassan", email="a@b.com", password="12345"),
            )

    @pytest.mark.asyncio
    async def test_register_long_username_rejected(self, mock_db_session):
        with pytest.raises(ValidationError, match="Username must be between 1 and 30"):
            await self.service.register_user(
                mock_db_session,
                RegisterRequest(username="x" * 31, email="a@b.com", password="secret1"),
            )

    @pytest.mark.asyncio
    async def test_register_existing_user_raises_conflict(self, mock_db_session):
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email_or_username = AsyncMock(return_value=make_user())
            mock_store.create = AsyncMock()

            with pytest.raises(ConflictError, match="User already exists!"):
                await self.service.register_user(
                    mock_db_session,
                    RegisterRequest(username="other", email="HASSAN@mail.com", password="secret1"),
                )

            mock_store.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_register_unique_constraint_race_raises_conflict(self, mock_db_session):
        """The insert losing a race to a concurrent registration is still a conflict."""
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email_or_username = AsyncMock(return_value=None)
            mock_store.create = AsyncMock(
                side_effect=IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed"))
            )

            with pytest.raises(ConflictError):
                await self.service.register_user(
                    mock_db_session,
                    RegisterRequest(username="hassan", email="hassan@mail.com", password="secret1"),
                )

    @pytest.mark.asyncio
    async def test_register_store_failure_raises_internal_error(self, mock_db_session):
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email_or_username = AsyncMock(
                side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
            )

            with pytest.raises(InternalError) as exc_info:
                await self.service.register_user(
                    mock_db_session,
                    RegisterRequest(username="hassan", email="hassan@mail.com", password="secret1"),
                )

        assert "connection refused" not in exc_info.value.message
        assert exc_info.value.context["original_error"] == "OperationalError"


class TestLoginUser:
    """Tests for UserService.login_user."""

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_login_success(self, mock_db_session):
        user = make_user()
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email = AsyncMock(return_value=user)

            result = await self.service.login_user(
                mock_db_session, LoginRequest(email="Hassan@MAIL.com", password="secret1")
            )

            mock_store.find_by_email.assert_awaited_once_with(mock_db_session, "hassan@mail.com")

        assert result.message == "Login successful"
        assert result.id == user.id
        assert result.email == "hassan@mail.com"
        assert result.username == "hassan"

    @pytest.mark.asyncio
    async def test_login_unknown_email_raises_not_found(self, mock_db_session):
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email = AsyncMock(return_value=None)

            with pytest.raises(NotFoundError):
                await self.service.login_user(
                    mock_db_session, LoginRequest(email="ghost@mail.com", password="secret1")
                )

    @pytest.mark.asyncio
    async def test_login_wrong_password_raises_auth_error(self, mock_db_session):
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email = AsyncMock(return_value=make_user())

            with pytest.raises(AuthError, match="Invalid credentials"):
                await self.service.login_user(
                    mock_db_session, LoginRequest(email="hassan@mail.com", password="wrong-pass")
                )

    @pytest.mark.asyncio
    async def test_login_missing_password_raises_validation_error(self, mock_db_session):
        with pytest.raises(ValidationError):
            await self.service.login_user(mock_db_session, LoginRequest(email="hassan@mail.com"))

    @pytest.mark.asyncio
    async def test_login_store_failure_raises_internal_error(self, mock_db_session):
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email = AsyncMock(side_effect=RuntimeError("pool exhausted"))

            with pytest.raises(InternalError):
                await self.service.login_user(
                    mock_db_session, LoginRequest(email="hassan@mail.com", password="secret1")
                )


class TestLogoutUser:
    """Tests for UserService.logout_user."""

    def setup_method(self):
        self.service = UserService()

    @pytest.mark.asyncio
    async def test_logout_existing_user(self, mock_db_session):
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email = AsyncMock(return_value=make_user())

            result = await self.service.logout_user(
                mock_db_session, LogoutRequest(email="HASSAN@mail.com")
            )

        assert result.message == "Logout successful"
        mock_db_session.add.assert_not_called()
        mock_db_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_logout_unknown_email_raises_not_found(self, mock_db_session):
        with patch("postboard.services.user_service.user_store") as mock_store:
            mock_store.find_by_email = AsyncMock(return_value=None)

            with pytest.raises(NotFoundError, match="User not found"):
                await self.service.logout_user(mock_db_session, LogoutRequest(email="ghost@mail.com"))

    @pytest.mark.asyncio
    async def test_logout_missing_email_raises_validation_error(self, mock_db_session):
        with pytest.raises(ValidationError):
            await self.service.logout_user(mock_db_session, LogoutRequest())
