# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Catalog entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from bookreviews.domain.exceptions import InvariantViolation


@dataclass(slots=True)
class Book:
    """A catalog entry. Only ``reviews`` ever changes after construction.

    ``reviews`` maps a username to that user's single review text.
    """

    isbn: str
    author: str
    title: str
    reviews: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.isbn or not self.isbn.strip():
            raise InvariantViolation("isbn must not be empty", field="isbn")

    @classmethod
    def from_mapping(cls, isbn: str, data: Mapping[str, Any]) -> Book:
        reviews = data.get("reviews") or {}
        if not isinstance(reviews, Mapping):
            raise InvariantViolation("reviews must be a mapping", field="reviews")
        return cls(
            isbn=str(isbn),
            author=str(data.get("author", "")),
            title=str(data.get("title", "")),
            reviews={str(user): str(text) for user, text in reviews.items()},
        )

    def snapshot(self) -> Book:
        return Book(
            isbn=self.isbn,
            author=self.author,
            title=self.title,
            reviews=dict(self.reviews),
        )
