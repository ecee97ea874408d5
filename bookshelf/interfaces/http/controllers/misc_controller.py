# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from bookshelf.infrastructure.storage import JsonCollection


class MiscController:
    def __init__(self, *, users: JsonCollection, books: JsonCollection) -> None:
        self._users = users
        self._books = books

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        for name, collection in (("users", self._users), ("books", self._books)):
            readable = collection.is_readable()
            status[name] = "ok" if readable else "error"
            status["ok"] = bool(status["ok"]) and readable
        return jsonify(status)
