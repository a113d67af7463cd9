from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, domain_error, system_error
from ..container import Container
from ..core.constants import SUMMARY_CSV_FILENAME
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/summary", methods=["GET"], endpoint="admin_summary")
    @admin_required
    def admin_summary():
        try:
            rows = container.payroll_summary_service.build_summary()
            return jsonify({"success": True, "rows": [r.to_dict() for r in rows]})
        except Exception:
            return system_error("generating summary")

    @app.route("/api/admin/summary.csv", methods=["GET"], endpoint="admin_summary_csv")
    @admin_required
    def admin_summary_csv():
        try:
            csv_text = container.payroll_summary_service.export_csv()
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return system_error("exporting summary")

        return app.response_class(
            csv_text.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={SUMMARY_CSV_FILENAME}"},
        )
