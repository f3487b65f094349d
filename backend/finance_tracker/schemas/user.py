"""
User and login schemas.
"""

from pydantic import AliasChoices, BaseModel, Field


class UserCreate(BaseModel):
    """Sign-up payload. ``password_hash`` carries the raw password."""
    email: str = Field(..., min_length=1, max_length=255)
    password_hash: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("password_hash", "password"),
    )


class LoginRequest(BaseModel):
    email: str
    password_hash: str = Field(
        ...,
        validation_alias=AliasChoices("password_hash", "password"),
    )


class PublicUser(BaseModel):
    id: int
    email: str

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    token: str
