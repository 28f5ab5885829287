from typing import Annotated
from pydantic import BaseModel, EmailStr, Field, computed_field, field_validator
from datetime import datetime

from fitmarket.content import initials, role_label
from fitmarket.models import UserRole

NameStr = Annotated[str, Field(strip_whitespace=True, min_length=1, max_length=120)]

class UserRegister(BaseModel):
    email: EmailStr = Field(max_length=255)
    name: NameStr
    # no regex here: Pydantic v2 core regex doesn't support look-arounds
    password: Annotated[str, Field(min_length=12, max_length=128)]
    role: UserRole

    @field_validator("password")
    @classmethod
    def password_policy(cls, v: str) -> str:
        # OWASP-ish: require lower, upper, digit, special
        if not any(c.islower() for c in v):
            raise ValueError("password must include a lowercase letter")
        if not any(c.isupper() for c in v):
            raise ValueError("password must include an uppercase letter")
        if not any(c.isdigit() for c in v):
            raise ValueError("password must include a digit")
        if not any(not c.isalnum() for c in v):
            raise ValueError("password must include a special character")
        return v

class UserLogin(BaseModel):
    email: EmailStr
    password: Annotated[str, Field(min_length=1, max_length=256)]

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

class ProfileRead(BaseModel):
    """What other users see: community list, public profile pages."""
    id: str
    name: str
    role: UserRole
    avatar_url: str | None = None
    created_at: datetime
    model_config = {"from_attributes": True}

    @computed_field
    @property
    def role_label(self) -> str:
        return role_label(self.role)

    @computed_field
    @property
    def initials(self) -> str:
        return initials(self.name)

class UserRead(ProfileRead):
    email: EmailStr
