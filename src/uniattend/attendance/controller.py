from __future__ import annotations

import io
import json
import logging
from datetime import date

from flask import Flask, jsonify, request, send_file

from ..core.constants import EXPORT_FILENAME_PREFIX
from ..core.exceptions import ImportFormatError, StorageError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.errorhandler(StorageError)
    def handle_storage_error(e: StorageError):
        return jsonify({"error": "Failed to save attendance data"}), 500

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance_get")
    def api_attendance_get():
        return jsonify(service.read_all())

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_replace")
    def api_attendance_replace():
        data = request.get_json(silent=True)
        try:
            service.overwrite_all(data)
        except ImportFormatError as e:
            logger.warning("Rejected attendance import: %s", e)
            return jsonify({"error": str(e)}), 400
        return jsonify({"success": True})

    @app.route("/api/attendance/update", methods=["POST"], endpoint="api_attendance_update")
    def api_attendance_update():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        try:
            service.merge_field(data.get("weekId"), data.get("sessionId"), data.get("value"))
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify({"success": True})

    @app.route("/api/attendance/export", methods=["GET"], endpoint="api_attendance_export")
    def api_attendance_export():
        body = json.dumps(service.read_all(), indent=2, ensure_ascii=False).encode("utf-8")
        filename = f"{EXPORT_FILENAME_PREFIX}{date.today().strftime('%Y-%m-%d')}.json"
        return send_file(
            io.BytesIO(body),
            mimetype="application/json",
            as_attachment=True,
            download_name=filename,
        )
