from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    updates = container.update_service

    def _updates_json():
        return jsonify({"success": True, "version": updates.version(), "status": updates.status.to_dict()})

    @app.route("/api/settings/theme", methods=["GET"], endpoint="api_theme")
    def api_theme():
        return jsonify({"success": True, "theme": container.theme_service.get_theme().value})

    @app.route("/api/settings/theme", methods=["PUT"], endpoint="api_theme_set")
    def api_theme_set():
        data = request.get_json(silent=True)
        value = data.get("theme") if isinstance(data, dict) else None
        try:
            mode = container.theme_service.set_theme(value)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "theme": mode.value})

    @app.route("/api/settings/updates", methods=["GET"], endpoint="api_updates")
    def api_updates():
        return _updates_json()

    @app.route("/api/settings/updates/check", methods=["POST"], endpoint="api_updates_check")
    def api_updates_check():
        updates.check()
        return _updates_json()

    @app.route("/api/settings/updates/install", methods=["POST"], endpoint="api_updates_install")
    def api_updates_install():
        updates.install_now()
        return _updates_json()
