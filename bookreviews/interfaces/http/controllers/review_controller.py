# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from bookreviews.application.services.review_mutator import ReviewMutator
from bookreviews.application.services.session_authenticator import SessionAuthenticator
from bookreviews.interfaces.http.dto.reviews import ReviewMutationDTO, ReviewQueryDTO
from bookreviews.interfaces.http.session import session_required
from bookreviews.shared.errors.validation import raise_validation_error


class ReviewController:
    """Session-guarded review writes under ``/auth/review/<isbn>``."""

    def __init__(self, *, mutator: ReviewMutator, authenticator: SessionAuthenticator) -> None:
        self._mutator = mutator
        self._authenticator = authenticator

    def put_review(self, isbn: str, *, username: str) -> tuple[Response, int]:
        try:
            dto = ReviewQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)

        self._mutator.upsert(isbn, username, dto.review)
        return jsonify(ReviewMutationDTO(isbn=isbn, username=username).model_dump()), 200

    def delete_review(self, isbn: str, *, username: str) -> tuple[Response, int]:
        self._mutator.remove(isbn, username)
        return jsonify(ReviewMutationDTO(isbn=isbn, username=username).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        guarded = session_required(self._authenticator)
        bp = Blueprint("reviews", __name__, url_prefix="/auth/review")
        bp.add_url_rule(
            "/<isbn>", endpoint="put_review", view_func=guarded(self.put_review), methods=["PUT"]
        )
        bp.add_url_rule(
            "/<isbn>",
            endpoint="delete_review",
            view_func=guarded(self.delete_review),
            methods=["DELETE"],
        )
        return bp
