from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import parse_optional_int
from ..container import Container
from ..core.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/asistencia", methods=["POST"], endpoint="api_asistencia")
    def api_asistencia():
        """Camera webhook: raw image bytes in, check-in/check-out outcome out."""
        try:
            room_id = parse_optional_int(request.args.get("sala_id"), "sala_id")
            outcome = container.checkin_service.process_image(request.get_data(cache=False), room_id=room_id)
            return jsonify(outcome.to_payload()), 200
        except ValidationError as e:
            return jsonify({"mensaje": str(e)}), 400
        except NotFound as e:
            return jsonify({"mensaje": str(e)}), 404
        except Exception as e:
            logger.exception("Error procesando imagen de asistencia")
            return jsonify({"mensaje": f"Error interno: {e}"}), 500
