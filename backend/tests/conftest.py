import os
import sys
import pytest

# Ensure the backend root (containing the `wordgame` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from wordgame import create_app, socketio
from wordgame.services.game import LobbyRegistry, SessionCoordinator


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    LOBBY_IDS = ['lobby-1', 'lobby-2']
    CORS_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    DEFAULT_PLAYER_NAME = 'Player'


class RecordingTransport:
    """In-memory stand-in for the Socket.IO transport."""

    def __init__(self):
        self.groups = {}
        self.sent = []

    def subscribe(self, connection, group):
        self.groups.setdefault(group, set()).add(connection)

    def unsubscribe(self, connection, group):
        self.groups.get(group, set()).discard(connection)

    def send(self, event, payload=None, to=None):
        self.sent.append((event, payload, to))

    def events(self, name=None):
        return [s for s in self.sent if name is None or s[0] == name]

    def clear(self):
        self.sent = []


@pytest.fixture()
def transport():
    return RecordingTransport()


@pytest.fixture()
def coordinator(transport):
    return SessionCoordinator(LobbyRegistry(['lobby-1', 'lobby-2']), transport)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app):
    created = []

    def _make():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace='/'
        )
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected('/'):
                test_client.disconnect(namespace='/')
        except Exception:
            pass
