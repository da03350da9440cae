from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request, session

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..scope.model import CallerIdentity

logger = logging.getLogger(__name__)


def caller_from_session() -> CallerIdentity:
    """Read the identity the auth layer stored in the Flask session."""

    user_id = session.get("user_id")
    tenant_id = session.get("company_id")
    role = session.get("role")
    if user_id is None or tenant_id is None or not role:
        raise AuthenticationError("Unauthorized")
    try:
        return CallerIdentity(user_id=int(user_id), role=Role(str(role).upper()), tenant_id=int(tenant_id))
    except (TypeError, ValueError):
        raise AuthenticationError("Unauthorized") from None


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    def dashboard_stats():
        range_value: Optional[str] = request.args.get("range")
        try:
            caller = caller_from_session()
            report = container.stats_service.build(caller, range_value)
            return jsonify(report), 200
        except AuthenticationError:
            return jsonify({"error": "Unauthorized"}), 401
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception as e:
            logger.exception("Dashboard stats error")
            return jsonify({"error": str(e)}), 500
