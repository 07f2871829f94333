import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    # Room limits
    MAX_ROOM_PLAYERS = int(os.environ.get('MAX_ROOM_PLAYERS', '8'))
    ROOM_CODE_LENGTH = int(os.environ.get('ROOM_CODE_LENGTH', '6'))
    # Snake & Ladder refuses to start below this many players
    SNAKE_MIN_PLAYERS = int(os.environ.get('SNAKE_MIN_PLAYERS', '2'))
    # Goose Hunt countdown interval (seconds)
    GOOSE_TICK_SEC = float(os.environ.get('GOOSE_TICK_SEC', '1'))
