import pytest

from matchroom.game.registry import RoomRegistry
from matchroom.server import create_app

TEST_CONFIG = {
    "TESTING": True,
    "SOCKETIO_ASYNC_MODE": "threading",
    "TRUST_PROXY_HEADERS": False,
}


@pytest.fixture
def registry():
    return RoomRegistry()


@pytest.fixture
def make_app():
    def _make(**overrides):
        return create_app({**TEST_CONFIG, **overrides})

    return _make


@pytest.fixture
def app_and_socketio(make_app):
    return make_app()


@pytest.fixture
def app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture
def socketio(app_and_socketio):
    return app_and_socketio[1]


@pytest.fixture
def client(app):
    return app.test_client()
