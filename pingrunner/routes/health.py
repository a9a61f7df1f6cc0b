from flask import Blueprint, current_app, jsonify
from ..src.config import Config


bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    # No arma el dispatcher: solo reporta si ya existe
    dispatcher = current_app.extensions.get("pingrunner.dispatcher")
    return jsonify({
        "status": "ok",
        "service": "pingrunner",
        "debug": Config.DEBUG,
        "token_issuer_configured": bool(Config.PING_CLIENT_SECRET and Config.PING_BASE_URL),
        "operations": len(dispatcher.names()) if dispatcher is not None else 0,
    }), 200
