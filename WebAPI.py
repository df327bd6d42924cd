import os
import time
import uuid
from typing import Optional

from flask import Blueprint, Flask, request, g, send_from_directory
from flask_cors import CORS
from flask_restx import Api

from werkzeug.exceptions import NotFound, MethodNotAllowed, HTTPException

from polegrid_api.configs import AppConfig, load_config
from polegrid_api.Logger.log_main import get_logger
from polegrid_api.utils.errors import AppError, StorageError
from polegrid_api.utils.record_store import RecordStore
from polegrid_api.utils.route_loader import load_routes

# configure logger once per process, duplicate handlers
logger = get_logger()

LIVENESS_TEXT = "PoleGrid Services API running!"

def _failure(code: str, message: str, status: int):
    return {
        "success": False,
        "message": message,
        "error": {"code": code},
        "request_id": getattr(g, "request_id", None),
    }, status

def _handle_error(err: Exception):
    # unmatched path or wrong method: both fall through to "not found"
    if isinstance(err, (NotFound, MethodNotAllowed)):
        logger.info(
            "not_found",
            extra={"request_id": getattr(g, "request_id", None),
                   "path": getattr(request, "path", None),
                   "method": getattr(request, "method", None),
                   "status_code": 404
                   },
        )
        return _failure("NOT_FOUND", "Route not found", 404)

    if isinstance(err, StorageError):
        logger.error(err.detail, extra={"request_id": getattr(g, "request_id", None), "error_code": err.code})
        return _failure(err.code, err.message, err.http_status)

    # ValidationError
    if isinstance(err, AppError):
        return _failure(err.code, err.message, err.http_status)

    # If it's a standard HTTPException (like 400, 413)
    if isinstance(err, HTTPException):
        return _failure(err.name.upper().replace(" ", "_"), err.description, err.code)

    # fallback
    logger.exception("unhandled_error", extra={"request_id": getattr(g, "request_id", None)})
    return _failure("UNHANDLED", "An unexpected error occurred.", 500)

# app factory
def create_app(cfg: Optional[AppConfig] = None) -> Flask:
    app = Flask(__name__)
    cfg = cfg or load_config()
    logger.setLevel(cfg.log_level)

    # keep "Route not found" as-is instead of flask-restx's 404 suggestions
    app.config["RESTX_ERROR_404_HELP"] = False

    upload_dir = os.path.abspath(cfg.upload_dir)
    os.makedirs(upload_dir, exist_ok=True)
    # creates db.json with empty collections on first start
    RecordStore(cfg.db_path)

    # a plain "*" answers with a wildcard; a list makes flask-cors echo the origin
    origins = list(cfg.cors_origins)
    CORS(app, origins="*" if origins in ([], ["*"]) else origins)

    blueprint = Blueprint("api", __name__, url_prefix="/api")
    api = Api(blueprint, version="1.0", title="PoleGrid Services API", doc="/docs", errors={})
    load_routes(api, "polegrid_api.routes")
    app.register_blueprint(blueprint)

    @app.route("/")
    def liveness():
        return LIVENESS_TEXT, 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route("/uploads/<path:filename>")
    def uploaded_file(filename: str):
        return send_from_directory(upload_dir, filename)

    @app.before_request
    def before_request():
        g.request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        g.start_time = time.time()
        g.cfg = cfg  # request-scoped config handle

    @app.after_request
    def after_request(resp):
        latency_ms = int((time.time() - g.start_time) * 1000)
        resp.headers["X-Request-ID"] = g.request_id
        logger.info("request_complete", extra={
            "request_id": g.request_id,
            "method": request.method,
            "path": request.path,
            "status_code": resp.status_code,
            "latency_ms": latency_ms,
        })

        return resp

    # routes owned by the restx Api
    api.errorhandler(Exception)(_handle_error)
    # everything else: "/", "/uploads/..." and unmatched paths
    app.register_error_handler(Exception, _handle_error)

    return app


if __name__ == "__main__":
    config = load_config()
    create_app(config).run(host="0.0.0.0", port=config.port)
