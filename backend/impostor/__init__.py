from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS') or []
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One registry per app; handlers and HTTP routes share it
    from impostor.services.rooms import RoomRegistry, RoundEngine
    registry = RoomRegistry(
        code_length=flask_app.config.get('ROOM_CODE_LENGTH', 4),
        max_words=flask_app.config.get('MAX_WORDS', 50),
    )
    engine = RoundEngine(min_players=flask_app.config.get('MIN_PLAYERS', 4))
    flask_app.extensions['rooms'] = registry

    from impostor.main import main
    flask_app.register_blueprint(main)

    from impostor.api.rooms import rooms
    flask_app.register_blueprint(rooms, url_prefix='/api/rooms')

    # Register Socket.IO event handlers against this app's registry
    from impostor.socketio_events import register_socketio_handlers
    register_socketio_handlers(registry, engine, namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    return flask_app
