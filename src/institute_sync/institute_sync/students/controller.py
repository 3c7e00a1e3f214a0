from __future__ import annotations

from flask import Flask, request

from ..auth.gateway import token_required
from ..common.responses import domain_error, internal_error, ok
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    api_token_required = token_required(container.gateway)

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @api_token_required
    def list_students():
        try:
            data = container.student_service.list_students(
                level=request.args.get("level") or None,
                group=request.args.get("group") or None,
                search=request.args.get("search") or None,
            )
        except Exception as e:
            app.logger.exception("Unexpected error while listing students")
            return internal_error("Failed to read students", e)
        return ok(data)

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    @api_token_required
    def create_student():
        try:
            student = container.student_service.create_student(request.get_json(silent=True))
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            app.logger.exception("Unexpected error while creating student")
            return internal_error("Failed to add student", e)
        return ok({"message": "Student added successfully", "student": student}, 201)

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="student_detail")
    @api_token_required
    def student_detail(student_id: str):
        try:
            data = container.student_service.get_student_detail(student_id)
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            app.logger.exception("Unexpected error while reading student %s", student_id)
            return internal_error("Failed to read student", e)
        return ok(data)
