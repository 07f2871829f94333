"""Request-level failures surfaced to the caller through the join/create ack.

Illegal game actions are not errors: rule modules reject them by returning
``None`` and the room is left untouched.
"""


class RoomError(Exception):
    """Base class for failures reported back to the requester."""
    message = 'Room error'

    def __init__(self, room_id=None):
        self.room_id = room_id
        super().__init__(self.message)


class RoomNotFound(RoomError):
    message = 'Room not found'


class GameInProgress(RoomError):
    message = 'Game in progress'


class RoomFull(RoomError):
    message = 'Room Full'
