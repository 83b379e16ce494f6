# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from flask import Blueprint, jsonify

from product_catalog.infrastructure.storage import CollectionStore
from product_catalog.shared.errors import StorageUnavailableError


class MiscController:
    def __init__(self, *, stores: Sequence[CollectionStore]) -> None:
        self._stores = stores

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        storage: dict[str, str] = {}
        for store in self._stores:
            name = getattr(store, "name", type(store).__name__)
            try:
                store.load()
                storage[name] = "ok"
            except StorageUnavailableError:
                status["ok"] = False
                storage[name] = "unavailable"
        status["storage"] = storage
        return jsonify(status), 200 if status["ok"] else 503
