from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, domain_error, payload, system_error
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/pay-settings", methods=["GET"], endpoint="pay_settings")
    @admin_required
    def pay_settings():
        settings = container.pay_settings_service.get()
        return jsonify({"success": True, "start_days": list(settings.start_days)})

    @app.route("/api/admin/pay-settings", methods=["PUT", "POST"], endpoint="save_pay_settings")
    @admin_required
    def save_pay_settings():
        data = payload()
        try:
            settings = container.pay_settings_service.save(data.get("start_days", ""))
            return jsonify(
                {
                    "success": True,
                    "start_days": list(settings.start_days),
                    "message": "Pay period settings saved.",
                }
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return system_error("saving pay period settings")
