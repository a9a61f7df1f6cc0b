from flask import Flask, jsonify, request, g
import time
import logging

from .src.config import Config
from .routes.health import bp as health_bp
from .routes.operations import bp as operations_bp


def create_app(dispatcher=None):
    app = Flask(__name__)
    app.config.from_object(Config)

    # Si no se inyecta, routes/operations lo arma desde Config en el primer uso
    app.extensions["pingrunner.dispatcher"] = dispatcher

    app.register_blueprint(health_bp)
    app.register_blueprint(operations_bp, url_prefix="/operations")

    # Logging simple de todas las peticiones entrantes
    logging.basicConfig(level=logging.DEBUG if getattr(Config, 'DEBUG', True) else logging.INFO)

    @app.before_request
    def _log_start():
        g._start_time = time.time()

    @app.after_request
    def _log_request(resp):
        started = getattr(g, '_start_time', None)
        dur_ms = int((time.time() - started) * 1000) if started else -1
        logging.info(
            "%s %s -> %s (%d ms)",
            request.method,
            request.path,
            resp.status_code,
            dur_ms,
        )
        return resp

    @app.get("/")
    def root():
        return jsonify({"name": "pingrunner", "status": "ok"}), 200

    return app
