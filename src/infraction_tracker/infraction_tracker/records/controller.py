from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .service import EmployeeDetail, EmployeeSummary, InfractionRow, to_row, to_summary

logger = logging.getLogger(__name__)


def summary_json(s: EmployeeSummary) -> dict:
    return {
        "id": s.row_id,
        "employeeId": s.employee_id,
        "name": s.name,
        "totalPoints": s.total_points,
        "status": s.status.value,
        "tone": s.tone.value,
        "infractionCount": s.infraction_count,
    }


def infraction_json(r: InfractionRow) -> dict:
    return {
        "id": r.infraction_id,
        "type": r.type,
        "label": r.label,
        "points": r.points,
        "date": r.date,
        "store": r.store,
        "reason": r.reason,
    }


def detail_json(d: EmployeeDetail) -> dict:
    data = summary_json(d.summary)
    data["infractions"] = [infraction_json(r) for r in d.infractions]
    return data


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def _body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    def _error(e: Exception):
        if isinstance(e, NotFoundError):
            return jsonify({"success": False, "message": str(e)}), 404
        if isinstance(e, ValidationError):
            return jsonify({"success": False, "message": str(e)}), 400
        logger.exception("Unhandled error in %s", request.path)
        return jsonify({"success": False, "message": "Internal error"}), 500

    @app.route("/api/employees", methods=["GET"], endpoint="api_employees")
    def api_employees():
        try:
            items = service.list_summaries(query=request.args.get("q", ""))
            return jsonify({"success": True, "employees": [summary_json(s) for s in items]})
        except Exception as e:
            return _error(e)

    @app.route("/api/employees", methods=["POST"], endpoint="api_employees_add")
    def api_employees_add():
        try:
            data = _body()
            emp = service.add_employee(name=data.get("name", ""), employee_id=data.get("employeeId"))
            return jsonify({"success": True, "message": "Employee added", "employee": summary_json(to_summary(emp))}), 201
        except Exception as e:
            return _error(e)

    @app.route("/api/employees/<row_id>", methods=["GET"], endpoint="api_employee")
    def api_employee(row_id: str):
        try:
            return jsonify({"success": True, "employee": detail_json(service.get_detail(row_id))})
        except Exception as e:
            return _error(e)

    @app.route("/api/employees/<row_id>", methods=["PATCH"], endpoint="api_employee_update")
    def api_employee_update(row_id: str):
        try:
            data = _body()
            service.update_employee(row_id, name=data.get("name"), employee_id=data.get("employeeId"))
            return jsonify({"success": True, "message": "Employee updated", "employee": detail_json(service.get_detail(row_id))})
        except Exception as e:
            return _error(e)

    @app.route("/api/employees/<row_id>", methods=["DELETE"], endpoint="api_employee_delete")
    def api_employee_delete(row_id: str):
        try:
            emp = service.delete_employee(row_id)
            return jsonify({"success": True, "message": f"Deleted {emp.name}"})
        except Exception as e:
            return _error(e)

    @app.route("/api/employees/<row_id>/infractions", methods=["POST"], endpoint="api_infraction_add")
    def api_infraction_add(row_id: str):
        try:
            data = _body()
            inf = service.add_infraction(
                row_id,
                infraction_type=data.get("type"),
                on=data.get("date"),
                store=data.get("store", ""),
                reason=data.get("reason", ""),
            )
            return jsonify(
                {
                    "success": True,
                    "message": "Infraction recorded",
                    "infraction": infraction_json(to_row(inf)),
                    "employee": summary_json(to_summary(service.get_employee(row_id))),
                }
            ), 201
        except Exception as e:
            return _error(e)

    @app.route(
        "/api/employees/<row_id>/infractions/<infraction_id>",
        methods=["DELETE"],
        endpoint="api_infraction_delete",
    )
    def api_infraction_delete(row_id: str, infraction_id: str):
        try:
            service.delete_infraction(row_id, infraction_id)
            return jsonify(
                {
                    "success": True,
                    "message": "Infraction deleted",
                    "employee": summary_json(to_summary(service.get_employee(row_id))),
                }
            )
        except Exception as e:
            return _error(e)
