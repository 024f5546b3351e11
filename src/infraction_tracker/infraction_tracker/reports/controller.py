from __future__ import annotations

import csv
import io
import logging

from flask import Flask, jsonify, render_template, request

from ..core.exceptions import NotFoundError
from ..container import Container

logger = logging.getLogger(__name__)

CSV_FIELDS = ["date", "type", "points", "store", "reason"]


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    def _write_report_csv(*, report, filename: str):
        """Write the infraction history of one employee as a CSV download."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in report.rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/employees/<row_id>/report", methods=["GET"], endpoint="employee_report")
    def employee_report(row_id: str):
        try:
            report = service.build_employee_report(row_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return jsonify({"success": False, "message": "Internal error"}), 500
        return render_template("employee_report.html", report=report)

    @app.route("/employees/<row_id>/report.csv", methods=["GET"], endpoint="employee_report_csv")
    def employee_report_csv(row_id: str):
        try:
            report = service.build_employee_report(row_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return jsonify({"success": False, "message": "Internal error"}), 500
        return _write_report_csv(report=report, filename=f"{report.file_stem}.csv")
