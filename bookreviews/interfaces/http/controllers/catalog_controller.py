# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from bookreviews.application.services.catalog_queries import CatalogQueries
from bookreviews.interfaces.http.dto.catalog import BookDTO


class CatalogController:
    """Public, read-only catalog endpoints."""

    def __init__(self, *, queries: CatalogQueries) -> None:
        self._queries = queries

    def list_books(self) -> Response:
        books = {book.isbn: BookDTO.from_entity(book).model_dump() for book in self._queries.list_all()}
        return jsonify(books)

    def get_book(self, isbn: str) -> Response:
        return jsonify(BookDTO.from_entity(self._queries.get(isbn)).model_dump())

    def books_by_author(self, author: str) -> Response:
        return jsonify([BookDTO.from_entity(b).model_dump() for b in self._queries.by_author(author)])

    def books_by_title(self, title: str) -> Response:
        return jsonify([BookDTO.from_entity(b).model_dump() for b in self._queries.by_title(title)])

    def get_reviews(self, isbn: str) -> Response:
        return jsonify(self._queries.reviews_for(isbn))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("catalog", __name__)
        bp.add_url_rule("/", view_func=self.list_books, methods=["GET"])
        bp.add_url_rule("/isbn/<isbn>", view_func=self.get_book, methods=["GET"])
        bp.add_url_rule("/author/<author>", view_func=self.books_by_author, methods=["GET"])
        bp.add_url_rule("/title/<title>", view_func=self.books_by_title, methods=["GET"])
        bp.add_url_rule("/review/<isbn>", view_func=self.get_reviews, methods=["GET"])
        return bp
