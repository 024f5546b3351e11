from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.store_tag_service

    def _name() -> str:
        data = request.get_json(silent=True)
        if isinstance(data, dict):
            return str(data.get("name") or "")
        return request.args.get("name", "")

    @app.route("/api/stores", methods=["GET"], endpoint="api_stores")
    def api_stores():
        return jsonify({"success": True, "stores": service.list_tags()})

    @app.route("/api/stores", methods=["POST", "DELETE"], endpoint="api_stores_edit")
    def api_stores_edit():
        try:
            if request.method == "POST":
                tag = service.add_tag(_name())
                return jsonify({"success": True, "message": f"Added {tag}", "stores": service.list_tags()}), 201
            tag = service.delete_tag(_name())
            return jsonify({"success": True, "message": f"Removed {tag}", "stores": service.list_tags()})
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return jsonify({"success": False, "message": "Internal error"}), 500
