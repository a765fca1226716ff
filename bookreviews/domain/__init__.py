# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .catalog.entities import Book
from .exceptions import InvariantViolation
from .users.entities import SessionToken, User

__all__ = [
    "Book",
    "SessionToken",
    "User",
    "InvariantViolation",
]
