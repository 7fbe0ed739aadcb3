from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(raw):
    if not raw or raw.strip() == '*':
        return '*'
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ORIGINS'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One lobby pool per app, owned by the coordinator
    from wordgame.services.game import LobbyRegistry, SessionCoordinator, SocketIOTransport
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    registry = LobbyRegistry(flask_app.config.get('LOBBY_IDS') or ['lobby-1', 'lobby-2'])
    coordinator = SessionCoordinator(
        registry,
        SocketIOTransport(socketio, namespace=namespace),
        default_name=flask_app.config.get('DEFAULT_PLAYER_NAME', 'Player'),
    )
    flask_app.extensions['wordgame'] = coordinator

    # Import and register blueprints here
    from wordgame.main import main
    flask_app.register_blueprint(main)

    from wordgame.api.lobbies import lobbies
    flask_app.register_blueprint(lobbies, url_prefix='/api/lobbies')

    # Register Socket.IO event handlers
    from wordgame.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    flask_app.logger.info(f"[startup] lobbies={[lobby.id for lobby in registry.all()]} namespace={namespace}")
    return flask_app
