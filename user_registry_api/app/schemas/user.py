"""
Pydantic models for user data.

Create and update share the same shape: every write sends the complete
record (name, email and address) and all three fields must be
non-empty.  Write operations answer with a short confirmation message
rather than the stored record.
"""

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Ann"])
    email: str = Field(..., min_length=1, examples=["ann@example.com"])
    address: str = Field(..., min_length=1, examples=["1 Road"])

    model_config = {
        "str_strip_whitespace": True,
    }


class UserCreate(UserBase):
    """Schema for registering a user."""


class UserUpdate(UserBase):
    """Full replacement of a user's fields.

    Fields missing from the payload are rejected rather than carried
    over from the stored record.
    """


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: str

    model_config = {
        "from_attributes": True,
        "str_strip_whitespace": True,
    }


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    errorMessage: str
