# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from bookreviews.application.services.session_authenticator import SessionAuthenticator
from bookreviews.domain.users.entities import SessionToken
from bookreviews.domain.users.exceptions import InvalidCredentialsError
from bookreviews.domain.users.repositories import PasswordHasher, UserRepository
from bookreviews.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionAuthenticator,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher

    def authenticate(self, username: str, password: str) -> bool:
        user = self._users.find_by_username(username)
        return bool(user and self._password_hasher.verify(password, user.password_hash))

    def execute(self, username: str, password: str) -> SessionToken:
        if not self.authenticate(username, password):
            logger.warning(f"users.login: rejected user={username}")
            raise InvalidCredentialsError()

        return self._sessions.issue(username)
