"""
Postboard Backend — User Route Handlers
=========================================

What:  POST /api/v1/users/register, /login and /logout.
How:   Each route takes the parsed body, hands it to UserService with the
       request's database session, and returns the service's response model.
       Errors raised by the service are turned into JSON by the global
       exception handlers.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.database import get_db_session
from postboard.schemas.common import ErrorResponse
from postboard.schemas.user import (
    LoginRequest,
    LoginResponse,
    LogoutRequest,
    LogoutResponse,
    RegisterRequest,
    RegisterResponse,
)
from postboard.services.user_service import user_service

router = APIRouter(prefix="/api/v1/users", tags=["Users"])


@router.post(
    "/register",
    status_code=201,
    response_model=RegisterResponse,
    responses={
        400: {"description": "Missing fields or user already exists", "model": ErrorResponse},
        429: {"description": "Too many requests", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Register a new user",
)
async def register(
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db_session),
) -> RegisterResponse:
    """Creates an account; the email is stored lowercased."""
    return await user_service.register_user(db, payload)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Missing fields or invalid credentials", "model": ErrorResponse},
        404: {"description": "No user with this email", "model": ErrorResponse},
        429: {"description": "Too many requests", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Check an email/password pair",
)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    """No session or token is issued; the response only confirms the credentials."""
    return await user_service.login_user(db, payload)


@router.post(
    "/logout",
    response_model=LogoutResponse,
    responses={
        400: {"description": "Missing email", "model": ErrorResponse},
        404: {"description": "No user with this email", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Log out a user",
)
async def logout(
    payload: LogoutRequest,
    db: AsyncSession = Depends(get_db_session),
) -> LogoutResponse:
    return await user_service.logout_user(db, payload)
