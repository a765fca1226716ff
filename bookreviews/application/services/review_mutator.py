# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Authenticated changes to a book's review map.

Each review cell is addressed by ``(isbn, username)`` and is either absent
or holds one text. ``upsert`` moves it to present (replacing any text),
``remove`` moves it back to absent and reports ``ReviewNotFoundError``
when it already was. Callers pass a username that the session layer has
already resolved; nothing here re-authenticates.

Serialization of writes to the same book is the catalog repository's job
(see ``InMemoryCatalogRepository``).
"""

from __future__ import annotations

from bookreviews.domain.catalog.exceptions import BookNotFoundError, ReviewNotFoundError
from bookreviews.domain.catalog.repositories import CatalogRepository
from bookreviews.shared.logging import logger


class ReviewMutator:
    def __init__(self, *, catalog: CatalogRepository) -> None:
        self._catalog = catalog

    def upsert(self, isbn: str, username: str, text: str) -> None:
        if not self._catalog.exists(isbn):
            raise BookNotFoundError(isbn)

        self._catalog.set_review(isbn, username, text)
        logger.info(f"review.upsert: isbn={isbn} user={username}")

    def remove(self, isbn: str, username: str) -> None:
        if not self._catalog.exists(isbn):
            raise BookNotFoundError(isbn)

        if not self._catalog.delete_review(isbn, username):
            logger.info(f"review.remove: nothing to remove isbn={isbn} user={username}")
            raise ReviewNotFoundError(isbn, username)

        logger.info(f"review.remove: isbn={isbn} user={username}")


__all__ = ["ReviewMutator"]
