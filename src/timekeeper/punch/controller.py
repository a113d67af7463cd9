from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.time_utils import format_hours
from ..common.web import domain_error, employee_required, login_required, system_error
from ..container import Container
from ..core.exceptions import DomainError
from ..worklogs.serializers import log_json


def register(app: Flask, container: Container) -> None:
    @app.route("/api/punch", methods=["GET"], endpoint="punch_status")
    @employee_required
    def punch_status():
        current = container.punch_service.current_session(session["username"])
        return jsonify(
            {
                "success": True,
                "punched_in": current is not None,
                "punch_in": current.punch_in if current else None,
            }
        )

    @app.route("/api/punch/in", methods=["POST"], endpoint="punch_in")
    @employee_required
    def punch_in():
        try:
            punch = container.punch_service.punch_in(session["username"])
            return jsonify(
                {
                    "success": True,
                    "punch_in": punch.punch_in,
                    "message": f"You punched in at {punch.punch_in}.",
                }
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return system_error("punching in")

    @app.route("/api/punch/out", methods=["POST"], endpoint="punch_out")
    @employee_required
    def punch_out():
        try:
            log = container.punch_service.punch_out(session["username"])
            return jsonify(
                {
                    "success": True,
                    "log": log_json(log),
                    "message": (
                        f"You punched out at {log.punch_out}. "
                        f"Total worked: {format_hours(log.minutes_worked)} hours."
                    ),
                }
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return system_error("punching out")

    @app.route("/api/me/logs", methods=["GET"], endpoint="my_logs")
    @login_required
    def my_logs():
        logs = container.worklog_service.history_for(session["username"])
        return jsonify({"success": True, "logs": [log_json(log) for log in logs]})
