"""Flask application factory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, InternalServerError

from .config import GatewaySettings
from .extensions import db
from .services.post_store import PostStore, SqlPostStore, build_post_store
from .services.result import INTERNAL, StoreError

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(InternalServerError)
    def _internal_error(exc: InternalServerError):
        original = getattr(exc, "original_exception", None)
        if original is not None:
            logger.error("request.unhandled_exception", exc_info=original)
        error = StoreError(INTERNAL, "The server encountered an unexpected error.")
        return jsonify({"error": error.to_dict()}), 500

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        error = StoreError("http", exc.description or exc.name)
        return jsonify({"error": error.to_dict()}), exc.code


def create_app(
    settings: Optional[GatewaySettings] = None,
    store: Optional[PostStore] = None,
) -> Flask:
    """Configure and return the Flask application.

    ``settings`` defaults to the environment and ``store`` to whatever backend
    those settings select. Tests pass both explicitly.
    """

    load_dotenv()
    settings = settings or GatewaySettings.from_env()

    app = Flask(__name__)
    app.settings = settings

    # The local database is always configured so the models stay usable, but
    # nothing touches the filesystem unless the local store is actually used.
    default_sqlite_path = Path(app.instance_path) / "blog.db"
    database_uri = settings.local_database_uri or f"sqlite:///{default_sqlite_path}"
    app.config["SQLALCHEMY_DATABASE_URI"] = database_uri
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {"pool_pre_ping": True}
    app.config.setdefault("SQLALCHEMY_TRACK_MODIFICATIONS", False)

    # Ensure models are registered with SQLAlchemy before any table creation.
    from . import models  # noqa: F401

    db.init_app(app)

    if store is None:
        store = build_post_store(settings)
    app.post_store = store

    if isinstance(store, SqlPostStore):
        if database_uri.startswith("sqlite:///"):
            sqlite_path = database_uri.replace("sqlite:///", "", 1)
            Path(sqlite_path).expanduser().parent.mkdir(parents=True, exist_ok=True)
        with app.app_context():
            db.create_all()

    logger.info("Blog gateway using %s store", store.name)

    _register_error_handlers(app)
    CORS(app, origins=settings.cors_allow_origin, methods=["GET", "POST", "OPTIONS"])

    from .routes import api_bp

    app.register_blueprint(api_bp)

    return app
