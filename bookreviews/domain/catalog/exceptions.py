# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from bookreviews.shared.errors.base import NotFoundError


class BookNotFoundError(NotFoundError):
    code = "book_not_found"

    def __init__(self, isbn: str) -> None:
        super().__init__(context={"isbn": isbn})


class ReviewNotFoundError(NotFoundError):
    code = "review_not_found"

    def __init__(self, isbn: str, username: str) -> None:
        super().__init__(context={"isbn": isbn, "username": username})


class NoBooksMatchedError(NotFoundError):
    code = "no_books_matched"

    def __init__(self, field: str, value: str) -> None:
        super().__init__(context={field: value})
