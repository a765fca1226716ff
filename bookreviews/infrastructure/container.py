# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

from datetime import UTC, datetime
from functools import cached_property

from bookreviews.application.services.catalog_queries import CatalogQueries
from bookreviews.application.services.password_hashing import WerkzeugPasswordHasher
from bookreviews.application.services.review_mutator import ReviewMutator
from bookreviews.application.services.session_authenticator import (Clock,
                                                                     SessionAuthenticator,
                                                                     utc_now)
from bookreviews.application.use_cases.users.login_user import LoginUserUseCase
from bookreviews.application.use_cases.users.register_user import RegisterUserUseCase
from bookreviews.domain.catalog.entities import Book
from bookreviews.domain.users.entities import User
from bookreviews.domain.users.repositories import PasswordHasher
from bookreviews.infrastructure.catalog_seed import load_catalog
from bookreviews.infrastructure.repositories.memory import (InMemoryCatalogRepository,
                                                            InMemorySessionTokenRepository,
                                                            InMemoryUserRepository)
from bookreviews.interfaces.http.controllers.auth_controller import AuthController
from bookreviews.interfaces.http.controllers.catalog_controller import CatalogController
from bookreviews.interfaces.http.controllers.misc_controller import MiscController
from bookreviews.interfaces.http.controllers.review_controller import ReviewController
from bookreviews.shared.config import AppConfig, load_config
from bookreviews.shared.logging import logger

DEMO_USER = ("alonso", "12345")


class Container:
    """Owns one set of stores and the services built on them.

    Every collaborator is created on first access; ``books``,
    ``password_hasher`` and ``clock`` can be overridden for tests.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        books: list[Book] | None = None,
        password_hasher: PasswordHasher | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.config = config or load_config()
        self._books = books
        self._password_hasher = password_hasher
        self.clock = clock

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return self._password_hasher or WerkzeugPasswordHasher()

    @cached_property
    def catalog_repository(self) -> InMemoryCatalogRepository:
        books = self._books if self._books is not None else load_catalog(self.config.catalog_file)
        return InMemoryCatalogRepository(books)

    @cached_property
    def user_repository(self) -> InMemoryUserRepository:
        users = InMemoryUserRepository()
        if self.config.seed_demo_user:
            username, password = DEMO_USER
            users.add(
                User(
                    username=username,
                    password_hash=self.password_hasher.hash(password),
                    created_at=datetime.now(UTC),
                )
            )
            logger.info(f"users.seed: added demo user={username}")
        return users

    @cached_property
    def session_token_repository(self) -> InMemorySessionTokenRepository:
        return InMemorySessionTokenRepository()

    @cached_property
    def session_authenticator(self) -> SessionAuthenticator:
        return SessionAuthenticator(
            secret_key=self.config.secret_key,
            sessions=self.session_token_repository,
            ttl_seconds=self.config.session_ttl_seconds,
            clock=self.clock,
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(users=self.user_repository, password_hasher=self.password_hasher)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            sessions=self.session_authenticator,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def review_mutator(self) -> ReviewMutator:
        return ReviewMutator(catalog=self.catalog_repository)

    @cached_property
    def catalog_queries(self) -> CatalogQueries:
        return CatalogQueries(catalog=self.catalog_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            security=self.config.security,
            session_ttl_seconds=self.config.session_ttl_seconds,
        )

    @cached_property
    def review_controller(self) -> ReviewController:
        return ReviewController(
            mutator=self.review_mutator,
            authenticator=self.session_authenticator,
        )

    @cached_property
    def catalog_controller(self) -> CatalogController:
        return CatalogController(queries=self.catalog_queries)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(queries=self.catalog_queries)
