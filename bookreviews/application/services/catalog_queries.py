# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from bookreviews.domain.catalog.entities import Book
from bookreviews.domain.catalog.exceptions import BookNotFoundError, NoBooksMatchedError
from bookreviews.domain.catalog.repositories import CatalogRepository


class CatalogQueries:
    """Read-only lookups over the catalog."""

    def __init__(self, *, catalog: CatalogRepository) -> None:
        self._catalog = catalog

    def list_all(self) -> list[Book]:
        return list(self._catalog.list_all())

    def count(self) -> int:
        return len(self._catalog.list_all())

    def get(self, isbn: str) -> Book:
        book = self._catalog.get(isbn)
        if book is None:
            raise BookNotFoundError(isbn)
        return book

    def reviews_for(self, isbn: str) -> dict[str, str]:
        return dict(self.get(isbn).reviews)

    def by_author(self, author: str) -> list[Book]:
        return self._matching("author", author, lambda book: book.author)

    def by_title(self, title: str) -> list[Book]:
        return self._matching("title", title, lambda book: book.title)

    def _matching(self, field: str, value: str, attr: Callable[[Book], str]) -> list[Book]:
        needle = value.strip().casefold()
        found = [book for book in self._catalog.list_all() if attr(book).casefold() == needle]
        if not found:
            raise NoBooksMatchedError(field, value)
        return found
