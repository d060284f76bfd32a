"""
GetUs.Fit API - Authentication Schemas.

Pydantic schemas for authentication requests and responses.
"""

from pydantic import BaseModel, Field, ConfigDict


class RegisterRequest(BaseModel):
    """
    Schema for account registration request.

    Format rules (username pattern, password length) are checked by the
    route so it can report the exact rule that failed.

    Attributes:
        username: 2-30 letters, digits or underscores.
        password: Password (min 8 characters).
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "password": "password123"
            }
        }
    )

    username: str = Field(..., description="Account username")
    password: str = Field(..., description="Account password (minimum 8 characters)")


class LoginRequest(BaseModel):
    """
    Schema for login request.

    Attributes:
        username: Account username (any letter case).
        password: Account password.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "password": "password123"
            }
        }
    )

    username: str = Field(..., description="Account username")
    password: str = Field(..., description="Account password")


class TokenResponse(BaseModel):
    """
    Schema for authentication token response.

    Attributes:
        token: Signed JWT access token.
        token_type: Token type (always "bearer").
        user_id: Authenticated account's ID.
        username: Authenticated account's username.
        role: Role at the time the token was issued.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "user_id": 1,
                "username": "alice",
                "role": "user"
            }
        }
    )

    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    user_id: int = Field(..., description="Authenticated account's ID")
    username: str
    role: str


class AccountResponse(BaseModel):
    """Public view of an account."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str
