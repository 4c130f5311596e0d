from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import parse_optional_int
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/socios/<int:member_id>/asistencias", methods=["GET"], endpoint="api_member_history")
    def api_member_history(member_id: int):
        """Recent visits of one member, newest first."""
        try:
            if container.members_repo.get_by_id(member_id) is None:
                return jsonify({"mensaje": f"Socio {member_id} no encontrado"}), 404
            limit = parse_optional_int(request.args.get("limit"), "limit") or DEFAULT_HISTORY_LIMIT
            rows = container.attendance_service.get_history(member_id, limit=limit)
            return jsonify(rows), 200
        except ValidationError as e:
            return jsonify({"mensaje": str(e)}), 400
        except Exception as e:
            logger.exception("Error consultando asistencias del socio %s", member_id)
            return jsonify({"mensaje": f"Error interno: {e}"}), 500
