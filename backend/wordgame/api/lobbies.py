from flask import Blueprint, current_app, jsonify

from wordgame.errors import LobbyNotFound

lobbies = Blueprint('lobbies', __name__)


def _coordinator():
    return current_app.extensions['wordgame']


@lobbies.route('', methods=['GET'])
def list_lobbies():
    """Snapshot of every lobby in the pool, in configured order."""
    return jsonify(_coordinator().snapshots())


@lobbies.route('/<string:lobby_id>', methods=['GET'])
def get_lobby_state(lobby_id):
    try:
        payload = _coordinator().snapshot(lobby_id)
    except LobbyNotFound as exc:
        return jsonify({'error': exc.message}), 404
    return jsonify(payload)
