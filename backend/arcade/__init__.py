from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

from arcade.services.rooms import RoomRegistry

allowed_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)
registry = RoomRegistry()

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)
    registry.init_app(flask_app)

    # Import and register blueprints here
    from arcade.main import main
    flask_app.register_blueprint(main)

    from arcade.api.rooms import rooms
    flask_app.register_blueprint(rooms, url_prefix='/api/rooms')

    # Register Socket.IO event handlers
    # Importing here ensures the handlers bind to the initialized socketio instance
    from arcade.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    return flask_app
