"""Pydantic schemas for sign-up and sign-in endpoints."""

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Request schema for register and login."""

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)


class UserResponse(BaseModel):
    """Response schema for a user."""

    user_id: str
    email: str


class SessionResponse(BaseModel):
    """Response schema for a new sign-in session."""

    access_token: str
    token_type: str = "bearer"
    user: UserResponse
