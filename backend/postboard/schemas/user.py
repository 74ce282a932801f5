"""
Postboard Backend — User Request/Response Schemas
===================================================

What:  Pydantic models defining the API contract of the /api/v1/users endpoints.
Why:   Request models fix the field names and types of each body; response
       models fix exactly which user fields leave the server.

Request models:
    Every field is Optional on purpose. Pydantic rejects wrong types (an
    integer email, malformed JSON) with a 400, while "missing or blank"
    is decided by the service so all handlers report it with the same
    "All fields are required" message. Models are frozen: a handler can
    read the body but not rewrite it.

Response models:
    UserView never contains password material or internal flags.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field


# No whitespace stripping here: a password is stored exactly as typed.
# Email and username are trimmed by normalize() in the service.
_REQUEST_CONFIG = {"frozen": True}


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class RegisterRequest(BaseModel):
    """Body of POST /api/v1/users/register."""
    username: Optional[str] = Field(default=None, description="1-30 characters, stored lowercased")
    email: Optional[str] = Field(default=None, description="Stored lowercased; used as login key")
    password: Optional[str] = Field(default=None, description="6-50 characters")

    model_config = _REQUEST_CONFIG


class LoginRequest(BaseModel):
    """Body of POST /api/v1/users/login."""
    email: Optional[str] = Field(default=None, description="Matched case-insensitively")
    password: Optional[str] = Field(default=None)

    model_config = _REQUEST_CONFIG


class LogoutRequest(BaseModel):
    """Body of POST /api/v1/users/logout."""
    email: Optional[str] = Field(default=None, description="Matched case-insensitively")

    model_config = _REQUEST_CONFIG


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class UserView(BaseModel):
    """
    Sanitized user representation.

    Why only three fields: the client needs an id to refer to the account and
    the normalized email/username to display. Everything else stays private.
    """
    id: uuid.UUID = Field(description="Unique user identifier (UUID)")
    email: str = Field(description="Normalized (lowercased) email")
    username: str = Field(description="Normalized (lowercased) username")

    model_config = {"from_attributes": True}


class RegisterResponse(BaseModel):
    """Returned by POST /api/v1/users/register with HTTP 201."""
    message: str = Field(default="User registered successfully")
    user: UserView


class LoginResponse(UserView):
    """
    Returned by POST /api/v1/users/login with HTTP 200.

    The user fields sit at the top level next to the message. No token is
    issued: sessions are not part of this API.
    """
    message: str = Field(default="Login successful")


class LogoutResponse(BaseModel):
    """Returned by POST /api/v1/users/logout with HTTP 200."""
    message: str = Field(default="Logout successful")
