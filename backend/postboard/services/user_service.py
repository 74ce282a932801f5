"""
Postboard Backend — User Service (Registration, Login, Logout Handlers)
=========================================================================

What:  Business logic behind the three /api/v1/users endpoints.
Why:   Keeps validation, normalization, hashing and error translation out of
       the routes, so each flow can be tested with a mocked session.
How:   Each method validates its request model, calls UserStore once or
       twice, and returns a response model. Failures are raised as typed
       exceptions; the global handlers in main.py shape the HTTP response.

Registration Flow:
    ┌──────────┐   ┌────────────┐   ┌────────────┐   ┌──────────┐   ┌──────────┐
    │ Validate │──▶│ Normalize  │──▶│ Pre-check  │──▶│  Hash    │──▶│  Insert  │
    │  fields  │   │ email/user │   │ uniqueness │   │ password │   │  (store) │
    └──────────┘   └────────────┘   └────────────┘   └──────────┘   └──────────┘

    The pre-check is a fast path with a readable error. The database unique
    constraints remain the authority: a concurrent registration that slips
    between pre-check and insert surfaces as IntegrityError and is reported
    as the same ConflictError.

Sessions:
    Login and logout only verify that the account exists (and, for login,
    that the password matches). No token is issued and no state is changed;
    `logged_in` stays at its default.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.exceptions import (
    AuthError,
    ConflictError,
    InternalError,
    NotFoundError,
    PostboardError,
)
from postboard.models.user import USERNAME_MAX_LENGTH, User
from postboard.schemas.user import (
    LoginRequest,
    LoginResponse,
    LogoutRequest,
    LogoutResponse,
    RegisterRequest,
    RegisterResponse,
    UserView,
)
from postboard.security import hash_password, verify_password
from postboard.services.validation import check_length, normalize, require_fields
from postboard.stores.user_store import user_store

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 50


class UserService:
    """
    Handlers for user registration, login and logout.

    Error Handling Strategy:
        Our own exceptions propagate unchanged. A unique-constraint violation
        becomes ConflictError. Anything else raised while talking to the
        store is logged with its detail and replaced by InternalError, whose
        message is generic.
    """

    async def register_user(
        self, db: AsyncSession, payload: RegisterRequest
    ) -> RegisterResponse:
        """
        Create an account.

        Steps:
            1. Require username, email and password (non-blank)
            2. Normalize email and username (trim + lowercase)
            3. Check lengths: username 1-30, password 6-50
            4. Reject if the email or username is already taken
            5. Hash the password and insert the user

        Returns:
            RegisterResponse with the sanitized {id, email, username}

        Raises:
            ValidationError: Missing field or out-of-range length
            ConflictError: Email or username already registered
            InternalError: Store failure
        """
        require_fields({
            "username": payload.username,
            "email": payload.email,
            "password": payload.password,
        })

        email = normalize(payload.email)
        username = normalize(payload.username)
        check_length("username", username, 1, USERNAME_MAX_LENGTH)
        check_length("password", payload.password, PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH)

        try:
            existing = await user_store.find_by_email_or_username(db, email, username)
            if existing is not None:
                logger.info("Registration rejected: account already exists for %s", email)
                raise ConflictError()

            user = await user_store.create(
                db,
                username=username,
                email=email,
                password_hash=hash_password(payload.password),
            )
            logger.info("User registered: %s", user.id)
            return RegisterResponse(user=UserView.model_validate(user))

        except PostboardError:
            raise
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email/username
            logger.warning("Registration hit a unique constraint for %s: %s", email, e.orig)
            raise ConflictError(context={"constraint": "users"})
        except Exception as e:
            logger.error("Store error during registration: %s", str(e), exc_info=True)
            raise InternalError(context={"original_error": type(e).__name__})

    async def login_user(self, db: AsyncSession, payload: LoginRequest) -> LoginResponse:
        """
        Verify an email/password pair.

        Raises:
            ValidationError: Missing email or password
            NotFoundError: No account with this email
            AuthError: Password does not match the stored hash
            InternalError: Store failure
        """
        require_fields({"email": payload.email, "password": payload.password})
        email = normalize(payload.email)

        user = await self._get_by_email(db, email)

        if not verify_password(payload.password, user.password_hash):
            logger.info("Login rejected: password mismatch for user %s", user.id)
            raise AuthError()

        logger.info("User logged in: %s", user.id)
        return LoginResponse(id=user.id, email=user.email, username=user.username)

    async def logout_user(self, db: AsyncSession, payload: LogoutRequest) -> LogoutResponse:
        """
        Confirm a logout for an existing account.

        Only checks that the account exists; there is no server-side session
        to end.
        """
        require_fields({"email": payload.email})
        user = await self._get_by_email(db, normalize(payload.email))
        logger.info("User logged out: %s", user.id)
        return LogoutResponse()

    async def _get_by_email(self, db: AsyncSession, email: str) -> User:
        try:
            user = await user_store.find_by_email(db, email)
        except Exception as e:
            logger.error("Store error looking up user by email: %s", str(e), exc_info=True)
            raise InternalError(context={"original_error": type(e).__name__})

        if user is None:
            raise NotFoundError(resource="user", message="User not found")
        return user


user_service = UserService()
