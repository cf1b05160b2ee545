"""
Pydantic models for user data.

Defines schemas for creating, editing and reading users.  Validation
of field contents (required names, lengths, email shape) happens here
at the API boundary; the services and the store accept whatever they
are given.
"""

import re
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from user_management_api.app.models import User

# Same shape check as a browser's ``type=email`` input: something@host.tld
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserBase(BaseModel):
    forename: str = Field(..., min_length=1, max_length=100, examples=["Ada"])
    surname: str = Field(..., min_length=1, max_length=100, examples=["Lovelace"])
    email: str = Field(..., max_length=200, examples=["ada@example.com"])
    date_of_birth: Optional[date] = Field(None, examples=["1815-12-10"])

    @field_validator("forename", "surname")
    @classmethod
    def strip_names(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        value = value.strip()
        if not EMAIL_PATTERN.match(value):
            raise ValueError("Please enter a valid email address")
        return value


class UserCreate(UserBase):
    """Schema for adding a user.  New users are active unless stated otherwise."""

    is_active: bool = Field(True, examples=[True])

    def to_user(self) -> User:
        return User(
            forename=self.forename,
            surname=self.surname,
            email=self.email,
            is_active=self.is_active,
            date_of_birth=self.date_of_birth,
        )


class UserUpdate(UserBase):
    """Schema for editing a user.

    Every field of the stored user is replaced, so omitted optional
    fields are cleared and an omitted ``is_active`` deactivates the user.
    """

    is_active: bool = Field(False, examples=[True])

    def apply_to(self, user: User) -> User:
        user.forename = self.forename
        user.surname = self.surname
        user.email = self.email
        user.is_active = self.is_active
        user.date_of_birth = self.date_of_birth
        return user


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    forename: str
    surname: str
    email: str
    is_active: bool
    date_of_birth: Optional[date] = None

    model_config = {
        "from_attributes": True,
    }
