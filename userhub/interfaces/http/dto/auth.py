from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CredentialsFormDTO(BaseModel):
    """Username/password pair posted by the register and login forms."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)

    @field_validator("username", mode="before")
    @classmethod
    def _strip_username(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value
