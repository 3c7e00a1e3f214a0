from __future__ import annotations

from flask import Flask, request

from ..auth.gateway import token_required
from ..common.responses import domain_error, internal_error, ok
from ..common.validators import optional_positive_int
from ..container import Container
from ..core.exceptions import DomainError, InternalError


def register(app: Flask, container: Container) -> None:
    api_token_required = token_required(container.gateway)

    @app.route("/api/backup", methods=["POST"], endpoint="backup")
    @api_token_required
    def backup():
        try:
            result = container.backup_service.apply_backup(request.get_json(silent=True))
        except InternalError as e:
            return internal_error("Failed to receive backup", e)
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            app.logger.exception("Unexpected error while receiving backup")
            return internal_error("Failed to receive backup", e)

        if result.test:
            return ok({"message": "API is working, connection succeeded", "test": True})

        return ok(
            {
                "message": "Backup received successfully",
                "summary": result.summary,
                "syncId": result.sync_id,
                "timestamp": result.timestamp,
            }
        )

    @app.route("/api/sync-history", methods=["GET"], endpoint="sync_history")
    @api_token_required
    def sync_history():
        try:
            limit = optional_positive_int(request.args.get("limit"), "limit")
            data = container.sync_history_service.history(limit=limit)
        except DomainError as e:
            return domain_error(e)
        except Exception as e:
            app.logger.exception("Unexpected error while reading sync history")
            return internal_error("Failed to read sync history", e)
        return ok(data)
