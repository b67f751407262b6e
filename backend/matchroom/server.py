from __future__ import annotations

import sys
from typing import Any, Mapping

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import Config
from .game.service import init_registry
from .routes.health import bp as health_bp
from .routes.pages import bp as pages_bp
from .routes.rooms import bp as rooms_bp
from .realtime.handlers import register_socketio_handlers


def _default_async_mode() -> str:
    # - Windows: threading (eventlet has known compatibility issues on newer Python)
    # - Python >= 3.13: threading (safer default)
    # - Otherwise: eventlet
    if sys.platform.startswith("win") or sys.version_info >= (3, 13):
        return "threading"
    return "eventlet"


def create_app(overrides: Mapping[str, Any] | None = None) -> tuple[Flask, SocketIO]:
    app = Flask(__name__, static_url_path="/public")
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    if app.config.get("TRUST_PROXY_HEADERS", False):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)

    cors_origins = app.config.get("CORS_ORIGINS", "*")
    CORS(app, resources={r"/api/*": {"origins": cors_origins}})

    socketio = SocketIO(
        app,
        cors_allowed_origins=cors_origins,
        async_mode=app.config.get("SOCKETIO_ASYNC_MODE") or _default_async_mode(),
    )

    init_registry(app)

    app.register_blueprint(pages_bp)
    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(rooms_bp, url_prefix="/api")

    register_socketio_handlers(socketio)

    return app, socketio
