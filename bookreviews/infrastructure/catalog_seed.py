# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from bookreviews.domain.catalog.entities import Book
from bookreviews.shared.logging import logger

DEFAULT_CATALOG: dict[str, dict[str, Any]] = {
    "1": {"author": "Chinua Achebe", "title": "Things Fall Apart", "reviews": {}},
    "2": {"author": "Hans Christian Andersen", "title": "Fairy tales", "reviews": {}},
    "3": {"author": "Dante Alighieri", "title": "The Divine Comedy", "reviews": {}},
    "4": {"author": "Unknown", "title": "The Epic Of Gilgamesh", "reviews": {}},
    "5": {"author": "Unknown", "title": "The Book Of Job", "reviews": {}},
    "6": {"author": "Unknown", "title": "One Thousand and One Nights", "reviews": {}},
    "7": {"author": "Unknown", "title": "Njál's Saga", "reviews": {}},
    "8": {"author": "Jane Austen", "title": "Pride and Prejudice", "reviews": {}},
    "9": {"author": "Honoré de Balzac", "title": "Le Père Goriot", "reviews": {}},
    "10": {
        "author": "Samuel Beckett",
        "title": "Molloy, Malone Dies, The Unnamable, the trilogy",
        "reviews": {},
    },
}


def books_from_mapping(data: dict[str, Any]) -> list[Book]:
    if not isinstance(data, dict):
        raise ValueError("catalog must be an object keyed by isbn")
    return [Book.from_mapping(isbn, entry) for isbn, entry in data.items()]


def load_catalog(path: Path | None = None) -> list[Book]:
    if path is None:
        books = books_from_mapping(DEFAULT_CATALOG)
        logger.info(f"catalog.seed: loaded {len(books)} built-in books")
        return books

    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    books = books_from_mapping(data)
    logger.info(f"catalog.seed: loaded {len(books)} books from {path}")
    return books


__all__ = ["DEFAULT_CATALOG", "books_from_mapping", "load_catalog"]
