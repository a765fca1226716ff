from __future__ import annotations

from pydantic import BaseModel, Field

from bookreviews.domain.catalog.entities import Book


class BookDTO(BaseModel):
    isbn: str
    author: str
    title: str
    reviews: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_entity(cls, book: Book) -> BookDTO:
        return cls(isbn=book.isbn, author=book.author, title=book.title, reviews=dict(book.reviews))


class HealthDTO(BaseModel):
    ok: bool = True
    books: int
