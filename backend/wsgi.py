import logging

from dotenv import load_dotenv

load_dotenv()

from matchroom.server import create_app  # noqa: E402

app, socketio = create_app()

logging.basicConfig(level=app.config["LOG_LEVEL"])
