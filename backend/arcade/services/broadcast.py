from arcade import socketio

NAMESPACE = '/ws'


def channel_for(room_id: str) -> str:
    return f"room:{room_id}"


def broadcast_room(room) -> None:
    """Send the full room snapshot to everyone in the room's channel."""
    with room.lock:
        payload = room.to_dict()
    # Use socketio.emit since this may be called from a background task
    socketio.emit('room_update', payload, to=channel_for(room.id), namespace=NAMESPACE)
