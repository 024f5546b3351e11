from __future__ import annotations

from flask import Flask, jsonify

from .status import THRESHOLDS
from .table import policy_entries


def register(app: Flask) -> None:
    @app.route("/api/policy", methods=["GET"], endpoint="api_policy")
    def api_policy():
        return jsonify(
            {
                "success": True,
                "infractions": [
                    {"type": e.infraction_type.value, "label": e.label, "points": e.points} for e in policy_entries()
                ],
                "thresholds": [{"points": points, "status": status.value} for points, status in THRESHOLDS],
            }
        )
