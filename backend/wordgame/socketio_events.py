from flask import current_app, request
from flask_socketio import emit
from wordgame import socketio
from wordgame.errors import LobbyError

GENERIC_ERROR_MESSAGE = 'Something went wrong.'


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _coordinator():
    return current_app.extensions['wordgame']


def _as_text(value) -> str:
    return value if isinstance(value, str) else ''


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    _coordinator().disconnect(sid)
    current_app.logger.info(f"[disconnect] sid={sid} reason={reason}")


def handle_join_lobby(data=None):
    data = data if isinstance(data, dict) else {}
    _coordinator().join_lobby(_get_sid(), _as_text(data.get('lobbyId')), _as_text(data.get('name')))


def handle_start_game(data=None):
    _coordinator().start_game(_get_sid())


def handle_submit_word(word=None):
    _coordinator().submit_word(_get_sid(), _as_text(word))


def handle_restart_game(data=None):
    _coordinator().restart_game(_get_sid())


def handle_error(exc):
    """Report a failed command to the connection that sent it."""
    if isinstance(exc, LobbyError):
        current_app.logger.info(f"[rejected] sid={_get_sid()} event={request.event['message']} reason={exc.message!r}")
        emit('error-message', exc.message)
        return
    current_app.logger.error(f"[error] sid={_get_sid()} event={request.event['message']}", exc_info=exc)
    emit('error-message', GENERIC_ERROR_MESSAGE)


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on the given namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('join-lobby', handle_join_lobby, namespace=namespace)
    socketio.on_event('start-game', handle_start_game, namespace=namespace)
    socketio.on_event('submit-word', handle_submit_word, namespace=namespace)
    socketio.on_event('restart-game', handle_restart_game, namespace=namespace)
    socketio.on_error(namespace)(handle_error)
