# src/chirpy/schemas/user.py
"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserCredentials(BaseModel):
    """Email and password submitted to create or update an account."""

    email: str = Field(..., min_length=1, description="Account email, matched case-sensitively")
    password: str = Field(..., min_length=1, description="Cleartext password")


class LoginRequest(UserCredentials):
    """Schema for login submissions."""

    expires_in_seconds: int | None = Field(
        None,
        description="Requested token lifetime; omitted or 0 uses the server default",
    )


class UserResponse(BaseModel):
    """Public view of an account. Never includes the password hash."""

    id: int
    email: str

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(UserResponse):
    """Response returned after successful login."""

    token: str = Field(..., description="JWT bearer token")
