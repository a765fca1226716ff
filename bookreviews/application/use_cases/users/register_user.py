# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from bookreviews.domain.users.entities import User
from bookreviews.domain.users.repositories import PasswordHasher, UserRepository
from bookreviews.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def exists(self, username: str) -> bool:
        return self._users.exists(username)

    def execute(self, username: str, password: str) -> User:
        hashed = self._password_hasher.hash(password)
        user = User(username=username, password_hash=hashed, created_at=datetime.now(UTC))
        persisted = self._users.add(user)
        logger.info(f"users.register: user={username}")
        return persisted
