# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.catalog_queries import CatalogQueries
from .services.review_mutator import ReviewMutator
from .services.session_authenticator import SessionAuthenticator
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "CatalogQueries",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "ReviewMutator",
    "SessionAuthenticator",
]
