# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Process-lifetime repositories backed by plain dicts."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from threading import Lock

from bookreviews.domain.catalog.entities import Book
from bookreviews.domain.catalog.exceptions import BookNotFoundError
from bookreviews.domain.catalog.repositories import CatalogRepository
from bookreviews.domain.users.entities import SessionToken, User
from bookreviews.domain.users.exceptions import UserAlreadyExistsError
from bookreviews.domain.users.repositories import SessionTokenRepository, UserRepository
from bookreviews.infrastructure.locks import KeyedLocks


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = Lock()

    def exists(self, username: str) -> bool:
        with self._lock:
            return username in self._users

    def find_by_username(self, username: str) -> User | None:
        with self._lock:
            return self._users.get(username)

    def add(self, user: User) -> User:
        with self._lock:
            if user.username in self._users:
                raise UserAlreadyExistsError(context={"username": user.username})
            self._users[user.username] = user
            return user

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)


class InMemorySessionTokenRepository(SessionTokenRepository):
    def __init__(self) -> None:
        self._sessions: dict[str, SessionToken] = {}
        self._lock = Lock()

    def add(self, session: SessionToken) -> None:
        with self._lock:
            self._sessions[session.session_id] = session

    def get(self, session_id: str) -> SessionToken | None:
        with self._lock:
            return self._sessions.get(session_id)

    def discard(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def purge_expired(self, now: datetime) -> int:
        with self._lock:
            expired = [sid for sid, s in self._sessions.items() if not s.is_active(now)]
            for sid in expired:
                del self._sessions[sid]
            return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


class InMemoryCatalogRepository(CatalogRepository):
    """Catalog with a fixed ISBN set and a lock per book.

    The dict of books is never resized after construction, so lookups need
    no guard; every touch of a book's review map holds that book's lock.
    """

    def __init__(self, books: Iterable[Book]) -> None:
        self._books: dict[str, Book] = {}
        for book in books:
            if book.isbn in self._books:
                raise ValueError(f"duplicate isbn in catalog: {book.isbn}")
            self._books[book.isbn] = book.snapshot()
        self._locks = KeyedLocks()

    def _book(self, isbn: str) -> Book:
        book = self._books.get(isbn)
        if book is None:
            raise BookNotFoundError(isbn)
        return book

    def get(self, isbn: str) -> Book | None:
        book = self._books.get(isbn)
        if book is None:
            return None
        with self._locks.lock_for(isbn):
            return book.snapshot()

    def exists(self, isbn: str) -> bool:
        return isbn in self._books

    def list_all(self) -> list[Book]:
        snapshots = []
        for isbn, book in self._books.items():
            with self._locks.lock_for(isbn):
                snapshots.append(book.snapshot())
        return snapshots

    def set_review(self, isbn: str, username: str, text: str) -> None:
        book = self._book(isbn)
        with self._locks.lock_for(isbn):
            book.reviews[username] = text

    def delete_review(self, isbn: str, username: str) -> bool:
        book = self._book(isbn)
        with self._locks.lock_for(isbn):
            if username not in book.reviews:
                return False
            del book.reviews[username]
            return True


__all__ = [
    "InMemoryCatalogRepository",
    "InMemorySessionTokenRepository",
    "InMemoryUserRepository",
]
