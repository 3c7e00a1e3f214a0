from __future__ import annotations

from flask import Flask, request

from ..auth.gateway import token_required
from ..common.responses import domain_error, fail, internal_error, ok
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    api_token_required = token_required(container.gateway)

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return ok(container.system_service.index())

    @app.route("/api/status", methods=["GET"], endpoint="status")
    @api_token_required
    def status():
        try:
            data = container.system_service.status()
        except Exception as e:
            app.logger.exception("Unexpected error while reading status")
            return internal_error("Failed to read status", e)
        return ok(data)

    @app.route("/api/config", methods=["GET"], endpoint="config")
    @api_token_required
    def config():
        try:
            data = container.system_service.get_config()
        except Exception as e:
            app.logger.exception("Unexpected error while reading config")
            return internal_error("Failed to read config", e)
        return ok(data)

    @app.route("/api/data/<data_type>", methods=["DELETE"], endpoint="wipe_data")
    @api_token_required
    def wipe_data(data_type: str):
        try:
            message = container.system_service.wipe(data_type, request.get_json(silent=True))
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            app.logger.exception("Unexpected error while wiping %s", data_type)
            return internal_error("Failed to delete data", e)
        return ok({"message": message})

    @app.errorhandler(404)
    def not_found(_e):
        return fail("Endpoint not found", 404, requestedUrl=request.full_path.rstrip("?"))

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return fail(f"Method {request.method} is not allowed for {request.path}", 405)

    @app.errorhandler(413)
    def payload_too_large(_e):
        return fail("Request body is too large", 413)
