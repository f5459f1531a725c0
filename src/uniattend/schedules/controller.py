from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from .generator import week_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/weeks", methods=["GET"], endpoint="api_weeks")
    def api_weeks():
        return jsonify([week_to_dict(w) for w in container.weeks])
