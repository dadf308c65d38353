import os
import sys
import pytest

# Ensure the backend root (containing the `impostor` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from impostor import create_app, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    MIN_PLAYERS = 4
    MAX_WORDS = 50
    ROOM_CODE_LENGTH = 4
    SOCKETIO_NAMESPACE = '/'
    CORS_ORIGINS = ['http://localhost:3000']
    LOG_LEVEL = 'DEBUG'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def registry(flask_app):
    return flask_app.extensions['rooms']


@pytest.fixture()
def connect(flask_app):
    """Factory for Socket.IO test clients; returns (client, sid)."""
    opened = []

    def _connect():
        test_client = socketio.test_client(flask_app)
        opened.append(test_client)
        received = test_client.get_received()
        sid = next(pkt['args'][0]['sid'] for pkt in received if pkt['name'] == 'connected')
        return test_client, sid

    yield _connect
    for test_client in opened:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass
