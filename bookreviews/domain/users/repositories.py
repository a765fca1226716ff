# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import SessionToken, User


class UserRepository(Protocol):
    def exists(self, username: str) -> bool: ...
    def find_by_username(self, username: str) -> User | None: ...

    def add(self, user: User) -> User:
        """Insert ``user``; raise ``UserAlreadyExistsError`` if the name is taken.

        The existence check and the insert form one critical section.
        """
        ...


class SessionTokenRepository(Protocol):
    def add(self, session: SessionToken) -> None: ...
    def get(self, session_id: str) -> SessionToken | None: ...
    def discard(self, session_id: str) -> None: ...
    def purge_expired(self, now: datetime) -> int: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
