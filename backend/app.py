import logging

import os

import sys

from pathlib import Path

from dotenv import load_dotenv


def _configure_logging() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _patch_for_eventlet() -> None:
    # eventlet must patch the stdlib before Flask-SocketIO picks its async mode.
    async_mode = os.environ.get("SOCKETIO_ASYNC_MODE", "").strip()
    if sys.platform.startswith("win") or sys.version_info >= (3, 13):
        return
    if async_mode not in ("", "eventlet"):
        return

    import eventlet

    eventlet.monkey_patch()


def main() -> None:
    load_dotenv(Path(__file__).resolve().parents[1] / ".env")
    _configure_logging()
    _patch_for_eventlet()

    from matchroom.server import create_app

    app, socketio = create_app()

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))

    logging.getLogger("matchroom").info("listening on %s:%d", host, port)
    socketio.run(
        app,
        host=host,
        port=port,
        debug=os.environ.get("FLASK_DEBUG", "1") == "1",
        allow_unsafe_werkzeug=os.environ.get("ALLOW_UNSAFE_WERKZEUG", "1") == "1",
        use_reloader=os.environ.get("FLASK_USE_RELOADER", "0") == "1",
    )


if __name__ == "__main__":
    main()
