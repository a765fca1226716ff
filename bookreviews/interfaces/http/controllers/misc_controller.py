# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from bookreviews.application.services.catalog_queries import CatalogQueries
from bookreviews.interfaces.http.dto.catalog import HealthDTO


class MiscController:
    def __init__(self, *, queries: CatalogQueries) -> None:
        self._queries = queries

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        return jsonify(HealthDTO(books=self._queries.count()).model_dump())
