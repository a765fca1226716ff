from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, StrictStr


class CredentialsDTO(BaseModel):
    """Username/password pair. Only presence is checked; no strength rules."""

    username: StrictStr = Field(min_length=1, max_length=128)
    password: StrictStr = Field(min_length=1, max_length=256)


class RegisterRequestDTO(CredentialsDTO):
    pass


class LoginRequestDTO(CredentialsDTO):
    pass


class AuthSuccessDTO(BaseModel):
    ok: bool = True
    message: str | None = None


class LoginSuccessDTO(AuthSuccessDTO):
    token: str
    expires_at: datetime
