from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, domain_error, payload, system_error
from ..container import Container
from ..core.exceptions import DomainError
from .serializers import log_json


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/logs", methods=["GET"], endpoint="admin_logs")
    @admin_required
    def admin_logs():
        logs = container.worklog_service.list_logs()
        return jsonify({"success": True, "logs": [log_json(log) for log in logs]})

    @app.route("/api/admin/logs/<log_id>", methods=["PATCH"], endpoint="update_log_deduction")
    @admin_required
    def update_log_deduction(log_id: str):
        data = payload()
        try:
            log = container.worklog_service.update_deduction(log_id=log_id, deduction=data.get("deduction"))
            return jsonify({"success": True, "log": log_json(log)})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return system_error("saving deduction")
