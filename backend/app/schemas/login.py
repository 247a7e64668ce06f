"""Login form schema for the credentials strategy."""

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """Credentials narrowed from the login form."""

    email: EmailStr
    password: str = Field(min_length=6)
