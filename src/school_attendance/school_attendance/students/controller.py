from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, redirect, render_template, request, url_for

from ..container import Container
from ..core.enums import AlertColor


def register(app: Flask, container: Container) -> None:
    service = container.student_service
    alerts = container.alerts

    @app.route("/", endpoint="index")
    @app.route("/students", endpoint="present_students")
    def present_students():
        service.fetch_students()
        return render_template(
            "present_students.html",
            rows=service.get_rows(),
            loaded=service.roster.loaded,
            alert=alerts.pop_alert(),
        )

    @app.route("/students/<record_id>/checkout", methods=["POST"], endpoint="checkout")
    def checkout(record_id: str):
        service.check_out(record_id, request.form.get("name", ""))
        return redirect(url_for("present_students"))

    @app.route("/alerts/dismiss", methods=["POST"], endpoint="dismiss_alert")
    def dismiss_alert():
        alerts.dismiss()
        return redirect(url_for("present_students"))

    @app.route("/api/students", methods=["GET"], endpoint="api_students")
    def api_students():
        service.fetch_students()
        return jsonify(_roster_payload())

    @app.route("/api/students/<record_id>/checkout", methods=["POST"], endpoint="api_checkout")
    def api_checkout(record_id: str):
        data = request.get_json(silent=True) or {}
        alert = service.check_out(record_id, str(data.get("name", "")), notify=False)
        success = alert.color == AlertColor.TEAL
        payload = {"success": success, "alert": alert.as_dict(), **_roster_payload()}
        return jsonify(payload), (200 if success else 400)

    @app.route("/students/export.csv", methods=["GET"], endpoint="export_students")
    def export_students():
        out = io.StringIO()
        writer = csv.DictWriter(
            out,
            fieldnames=[
                "sr_no",
                "id",
                "roll_number",
                "name",
                "checkin",
                "checkout",
                "days_attended",
                "percentage",
            ],
        )
        writer.writeheader()
        for row in service.get_rows():
            writer.writerow(row.as_dict())

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": "attachment; filename=present_students.csv"},
        )

    def _roster_payload() -> dict:
        roster = service.roster
        return {
            "students": [row.as_dict() for row in service.get_rows()],
            # JSON object keys must be strings
            "tally": {("" if k is None else str(k)): v for k, v in roster.tally.items()},
        }
