from __future__ import annotations

from functools import wraps

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError, ValidationError
from ..core.logging import get_logger

logger = get_logger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "username" not in session:
            return jsonify({"success": False, "message": "Please log in to continue."}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "username" not in session:
            return jsonify({"success": False, "message": "Please log in to continue."}), 401
        if session.get("role") != Role.ADMIN.value:
            return jsonify({"success": False, "message": "You do not have permission."}), 403
        return view(*args, **kwargs)

    return wrapper


def employee_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "username" not in session:
            return jsonify({"success": False, "message": "Please log in to continue."}), 401
        if session.get("role") != Role.EMPLOYEE.value:
            return jsonify({"success": False, "message": "Only employees can punch in or out."}), 403
        return view(*args, **kwargs)

    return wrapper


def payload() -> dict:
    """JSON body, falling back to form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def domain_error(e: DomainError):
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(e, error_type):
            return jsonify({"success": False, "message": str(e)}), status
    return jsonify({"success": False, "message": str(e)}), 400


def system_error(action: str):
    logger.exception("request_failed", action=action, path=request.path)
    return jsonify({"success": False, "message": f"System error while {action}"}), 500
