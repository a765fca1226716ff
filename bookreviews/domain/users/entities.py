# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from bookreviews.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class User:

    username: str
    password_hash: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.username:
            raise InvariantViolation("username must not be empty", field="username")


@dataclass(slots=True, frozen=True)
class SessionToken:
    """A login session bound to one username.

    ``session_id`` keys the server-side session table, ``token`` is the
    signed handle handed to the client.
    """

    session_id: str
    username: str
    token: str
    issued_at: datetime
    expires_at: datetime

    def __post_init__(self) -> None:
        if self.expires_at <= self.issued_at:
            raise InvariantViolation("session must expire after it is issued", field="expires_at")

    def is_active(self, now: datetime) -> bool:
        return now < self.expires_at
