import os
import sys
import pytest

# Ensure the backend root (containing the `arcade` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from arcade import create_app, registry, socketio
from arcade.models import Player


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    MAX_ROOM_PLAYERS = 8
    ROOM_CODE_LENGTH = 6
    SNAKE_MIN_PLAYERS = 2
    GOOSE_TICK_SEC = 1


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application
    registry.clear()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')


@pytest.fixture()
def make_client(flask_app):
    """Factory for extra Socket.IO clients; all are disconnected on teardown."""
    clients = []

    def _make():
        c = socketio.test_client(flask_app, namespace='/ws')
        clients.append(c)
        return c

    yield _make
    for c in clients:
        if c.is_connected('/ws'):
            c.disconnect(namespace='/ws')


@pytest.fixture()
def players():
    return [
        Player(id='p1', username='Ann', color='#ef4444', is_host=True),
        Player(id='p2', username='Bob', color='#3b82f6'),
        Player(id='p3', username='Cy', color='#22c55e'),
        Player(id='p4', username='Dee', color='#eab308'),
    ]


@pytest.fixture()
def fixed_dice(monkeypatch):
    """Queue die rolls: ``fixed_dice(6, 3)`` makes the next rolls 6 then 3."""
    from arcade.services.games import randomizer
    queue = []

    def _set(*rolls):
        queue.extend(rolls)

    monkeypatch.setattr(randomizer, 'roll_die', lambda sides=6: queue.pop(0))
    return _set
