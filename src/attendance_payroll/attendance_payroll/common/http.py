from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request

from ..core.exceptions import DomainError, EmployeeNotFoundError, PayrollGenerationError

logger = logging.getLogger(__name__)


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("JSON object body is required")
    return data


def optional_str(data: dict, key: str) -> Optional[str]:
    value: Any = data.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def json_endpoint(view):
    """Wrap a view returning (payload, status); map errors to {"success": False}."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            payload, status = view(*args, **kwargs)
            return jsonify({"success": True, **payload}), status
        except EmployeeNotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except PayrollGenerationError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except (KeyError, ValueError, TypeError) as e:
            return jsonify({"success": False, "message": f"Invalid request: {e}"}), 400
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return jsonify({"success": False, "message": "Internal server error"}), 500

    return wrapper
