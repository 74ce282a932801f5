"""
Postboard Backend — Post Request/Response Schemas
===================================================

What:  API contract for POST /api/v1/posts/create.

`age` is a strict integer: a string, float or boolean is rejected by Pydantic
before the handler runs (reported as a 400 validation error). Bounds and
blank checks are applied by PostService.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field, StrictInt


class CreatePostRequest(BaseModel):
    """Body of POST /api/v1/posts/create."""
    name: Optional[str] = Field(default=None, description="Non-empty, trimmed")
    description: Optional[str] = Field(default=None, description="Non-empty, trimmed")
    age: Optional[StrictInt] = Field(default=None, description="Integer between 1 and 150 inclusive")

    model_config = {"frozen": True, "str_strip_whitespace": True}


class CreatePostResponse(BaseModel):
    """Returned with HTTP 201 after the post is stored."""
    message: str = Field(default="Post created successfully")
    id: uuid.UUID = Field(description="Identifier of the new post")
