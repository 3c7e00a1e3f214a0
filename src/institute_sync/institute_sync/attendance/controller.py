from __future__ import annotations

from flask import Flask, request

from ..auth.gateway import token_required
from ..common.responses import domain_error, internal_error, ok
from ..container import Container
from ..core.exceptions import DomainError


def _arg(name: str):
    return request.args.get(name) or None


def register(app: Flask, container: Container) -> None:
    api_token_required = token_required(container.gateway)

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @api_token_required
    def list_attendance():
        try:
            data = container.attendance_service.list_attendance(
                date=_arg("date"),
                student_id=_arg("studentId"),
                course=_arg("course"),
                from_date=_arg("fromDate"),
                to_date=_arg("toDate"),
            )
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            app.logger.exception("Unexpected error while listing attendance")
            return internal_error("Failed to read attendance", e)
        return ok(data)

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="attendance_report")
    @api_token_required
    def attendance_report():
        try:
            data = container.attendance_service.attendance_report(
                date=_arg("date"),
                course=_arg("course"),
                level=_arg("level"),
                group=_arg("group"),
            )
        except Exception as e:
            app.logger.exception("Unexpected error while building attendance report")
            return internal_error("Failed to build attendance report", e)
        return ok(data)
