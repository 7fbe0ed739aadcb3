import os


def _split_env(name, default):
    raw = os.environ.get(name) or default
    return [part.strip() for part in raw.split(',') if part.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '4000'))
    # Fixed pool of lobbies created at startup
    LOBBY_IDS = _split_env('LOBBY_IDS', 'lobby-1,lobby-2')
    # '*' or a comma-separated list of origins
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Name used when a player joins with a blank display name
    DEFAULT_PLAYER_NAME = os.environ.get('DEFAULT_PLAYER_NAME', 'Player')
