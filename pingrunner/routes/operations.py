"""Endpoints para listar y ejecutar las operaciones registradas.

Cada POST ejecuta exactamente una peticion (con refresh de token si hace
falta) y devuelve el Outcome como JSON.
"""

import logging

from flask import Blueprint, current_app, jsonify

from ..src.dispatcher import ApiDispatcher, build_dispatcher
from ..src.errors import AuthError, ConfigError, DispatchError


bp = Blueprint("operations", __name__)
logger = logging.getLogger(__name__)


def _dispatcher() -> ApiDispatcher:
    dispatcher = current_app.extensions.get("pingrunner.dispatcher")
    if dispatcher is None:
        dispatcher = build_dispatcher()
        current_app.extensions["pingrunner.dispatcher"] = dispatcher
    return dispatcher


@bp.get("")
def list_operations():
    try:
        return jsonify({"items": _dispatcher().names()}), 200
    except ConfigError as e:
        return jsonify({"error": str(e)}), 500


@bp.post("/<name>")
def run_operation(name: str):
    try:
        outcome = _dispatcher().dispatch(name)
    except DispatchError as e:
        return jsonify({"error": str(e), "operation": e.name}), 404
    except AuthError as e:
        logger.error("Auth failed for %s: %s", name, e)
        return jsonify({"error": str(e), "operation": name}), 502
    except ConfigError as e:
        return jsonify({"error": str(e)}), 500
    return jsonify(outcome.to_dict()), 200
