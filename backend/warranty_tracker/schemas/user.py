"""Pydantic schemas for registration and login."""
from pydantic import BaseModel


class Credentials(BaseModel):
    # Plain str: format and strength rules live in the credential service
    # so every failure comes back as the same field-error mapping.
    email: str = ""
    password: str = ""


class UserOut(BaseModel):
    """Safe projection of a User, without the password hash."""

    email: str

    model_config = {"from_attributes": True}
