# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Book


class CatalogRepository(Protocol):
    """Book store with a fixed set of ISBNs; only review maps mutate.

    ``get`` and ``list_all`` return snapshots detached from the store.
    """

    def get(self, isbn: str) -> Book | None: ...
    def exists(self, isbn: str) -> bool: ...
    def list_all(self) -> Sequence[Book]: ...
    def set_review(self, isbn: str, username: str, text: str) -> None: ...
    def delete_review(self, isbn: str, username: str) -> bool: ...
