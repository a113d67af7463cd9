from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import admin_required, domain_error, payload, system_error
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import DomainError, ValidationError
from .model import Account


def _account_json(account: Account) -> dict:
    return {"username": account.username, "role": account.role.value, "hourly_rate": account.hourly_rate}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = payload()
        role_s = data.get("role")
        try:
            try:
                role = Role(role_s) if role_s else None
            except ValueError:
                raise ValidationError("Invalid account role")

            s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""), role)

            session.clear()
            session["username"] = s_user.username
            session["role"] = s_user.role.value
            return jsonify({"success": True, "username": s_user.username, "role": s_user.role.value})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return system_error("logging in")

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/admin/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    def admin_employees():
        employees = container.account_service.list_employees()
        return jsonify({"success": True, "employees": [_account_json(a) for a in employees]})

    @app.route("/api/admin/employees", methods=["POST"], endpoint="add_employee")
    @admin_required
    def add_employee():
        data = payload()
        try:
            account = container.account_service.create_employee(
                username=data.get("username", ""),
                password=data.get("password", ""),
                hourly_rate=data.get("hourly_rate"),
            )
            return jsonify({"success": True, "employee": _account_json(account)}), 201
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return system_error("adding employee")

    @app.route("/api/admin/employees/<username>", methods=["PATCH"], endpoint="update_employee")
    @admin_required
    def update_employee(username: str):
        data = payload()
        try:
            account = container.account_service.set_hourly_rate(username=username, hourly_rate=data.get("hourly_rate"))
            return jsonify({"success": True, "employee": _account_json(account)})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return system_error("updating employee")

    @app.route("/api/admin/employees/<username>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    def delete_employee(username: str):
        try:
            container.account_service.delete_account(username=username)
            return jsonify({"success": True})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            return system_error("deleting employee")
