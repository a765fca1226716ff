from __future__ import annotations

from threading import Barrier, Thread

import pytest

from bookreviews.application.services.review_mutator import ReviewMutator
from bookreviews.domain.catalog.entities import Book
from bookreviews.domain.catalog.exceptions import BookNotFoundError, ReviewNotFoundError
from bookreviews.infrastructure.repositories.memory import InMemoryCatalogRepository


@pytest.fixture()
def catalog() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository(
        [
            Book(isbn="001", author="Chinua Achebe", title="Things Fall Apart"),
            Book(isbn="002", author="Jane Austen", title="Pride and Prejudice"),
        ]
    )


@pytest.fixture()
def mutator(catalog: InMemoryCatalogRepository) -> ReviewMutator:
    return ReviewMutator(catalog=catalog)


def _reviews(catalog: InMemoryCatalogRepository, isbn: str) -> dict[str, str]:
    book = catalog.get(isbn)
    assert book is not None
    return book.reviews


def test_upsert_creates_review(mutator: ReviewMutator, catalog: InMemoryCatalogRepository) -> None:
    mutator.upsert("001", "alice", "Great")

    assert _reviews(catalog, "001") == {"alice": "Great"}
    assert _reviews(catalog, "002") == {}


def test_upsert_is_idempotent(mutator: ReviewMutator, catalog: InMemoryCatalogRepository) -> None:
    mutator.upsert("001", "alice", "Great")
    mutator.upsert("001", "alice", "Great")

    assert _reviews(catalog, "001") == {"alice": "Great"}


def test_upsert_last_write_wins_without_touching_others(
    mutator: ReviewMutator, catalog: InMemoryCatalogRepository
) -> None:
    mutator.upsert("001", "bob", "Fine")
    mutator.upsert("001", "alice", "Great")
    mutator.upsert("001", "alice", "Actually dull")

    assert _reviews(catalog, "001") == {"alice": "Actually dull", "bob": "Fine"}


def test_upsert_accepts_empty_text(mutator: ReviewMutator, catalog: InMemoryCatalogRepository) -> None:
    mutator.upsert("001", "alice", "")

    assert _reviews(catalog, "001") == {"alice": ""}
    mutator.remove("001", "alice")


def test_upsert_unknown_book(mutator: ReviewMutator) -> None:
    with pytest.raises(BookNotFoundError) as exc_info:
        mutator.upsert("999", "alice", "X")

    assert exc_info.value.status == 404
    assert exc_info.value.to_dict() == {"error": "book_not_found", "context": {"isbn": "999"}}


def test_remove_deletes_only_own_review(
    mutator: ReviewMutator, catalog: InMemoryCatalogRepository
) -> None:
    mutator.upsert("001", "alice", "Great")
    mutator.upsert("001", "bob", "Fine")

    mutator.remove("001", "alice")

    assert _reviews(catalog, "001") == {"bob": "Fine"}


def test_remove_absent_review_reports_every_time(mutator: ReviewMutator) -> None:
    mutator.upsert("001", "alice", "Great")
    mutator.remove("001", "alice")

    for _ in range(2):
        with pytest.raises(ReviewNotFoundError) as exc_info:
            mutator.remove("001", "alice")
        assert exc_info.value.code == "review_not_found"


def test_remove_unknown_book(mutator: ReviewMutator) -> None:
    with pytest.raises(BookNotFoundError):
        mutator.remove("999", "alice")


def test_reads_are_detached_snapshots(
    mutator: ReviewMutator, catalog: InMemoryCatalogRepository
) -> None:
    mutator.upsert("001", "alice", "Great")
    snapshot = catalog.get("001")
    assert snapshot is not None

    snapshot.reviews["mallory"] = "injected"
    mutator.upsert("001", "alice", "Changed")

    assert snapshot.reviews["alice"] == "Great"
    assert _reviews(catalog, "001") == {"alice": "Changed"}


def test_concurrent_writers_keep_every_cell(
    mutator: ReviewMutator, catalog: InMemoryCatalogRepository
) -> None:
    users = [f"user{i}" for i in range(16)]
    barrier = Barrier(len(users))

    def write(username: str) -> None:
        barrier.wait()
        for n in range(50):
            mutator.upsert("001", username, f"{username}-{n}")
            mutator.upsert("002", username, f"{username}-{n}")

    threads = [Thread(target=write, args=(u,)) for u in users]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    expected = {u: f"{u}-49" for u in users}
    assert _reviews(catalog, "001") == expected
    assert _reviews(catalog, "002") == expected
