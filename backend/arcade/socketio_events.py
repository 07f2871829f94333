from flask import current_app, request
from flask_socketio import emit, join_room, leave_room

from arcade import registry, socketio
from arcade.errors import RoomError
from arcade.services.broadcast import NAMESPACE, broadcast_room, channel_for
from arcade.services.rooms import normalize_code
from arcade.services.scheduler import start_goose_clock


def _get_sid() -> str:
    return request.sid  # type: ignore


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_disconnect(*args):
    sid = _get_sid()
    for room in registry.leave(sid):
        current_app.logger.info(f"[disconnect] sid={sid} room={room.id}")
        broadcast_room(room)


def handle_create_room(data):
    username = ((data or {}).get('username') or '').strip()
    if not username:
        return {'success': False, 'error': 'username is required'}
    room = registry.create_room(_get_sid(), username)
    join_room(channel_for(room.id))
    current_app.logger.info(f"[room-create] room={room.id} host={username!r}")
    broadcast_room(room)
    return {'success': True, 'roomId': room.id}


def handle_join_room(data):
    room_id = (data or {}).get('roomId')
    username = ((data or {}).get('username') or '').strip()
    if not room_id or not username:
        return {'success': False, 'error': 'roomId and username are required'}
    try:
        room = registry.join_room(room_id, _get_sid(), username)
    except RoomError as exc:
        current_app.logger.info(f"[room-join-refused] room={room_id} reason={exc.message!r}")
        return {'success': False, 'error': exc.message}
    join_room(channel_for(room.id))
    broadcast_room(room)
    return {'success': True, 'roomId': room.id}


def handle_leave_room(data):
    room_id = (data or {}).get('roomId')
    if not room_id:
        emit('error', {'message': 'roomId is required'})
        return
    leave_room(channel_for(normalize_code(room_id)))
    for room in registry.leave(_get_sid(), room_id):
        broadcast_room(room)
    emit('left', {'roomId': normalize_code(room_id)})


def handle_select_game(data):
    data = data or {}
    room = registry.select_game(data.get('roomId'), _get_sid(), data.get('gameType'))
    if room is not None:
        broadcast_room(room)


def handle_start_game(data):
    room = registry.start_game((data or {}).get('roomId'), _get_sid())
    if room is None:
        return
    broadcast_room(room)
    start_goose_clock(current_app._get_current_object(), room)


def handle_game_action(data):
    data = data or {}
    room = registry.game_action(data.get('roomId'), _get_sid(), data.get('action'), data.get('payload'))
    if room is None:
        return
    broadcast_room(room)
    # A reset Goose Hunt gets a fresh clock
    start_goose_clock(current_app._get_current_object(), room)


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'."""
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('create_room', handle_create_room, namespace=NAMESPACE)
    socketio.on_event('join_room', handle_join_room, namespace=NAMESPACE)
    socketio.on_event('leave_room', handle_leave_room, namespace=NAMESPACE)
    socketio.on_event('select_game', handle_select_game, namespace=NAMESPACE)
    socketio.on_event('start_game', handle_start_game, namespace=NAMESPACE)
    socketio.on_event('game_action', handle_game_action, namespace=NAMESPACE)
    socketio.on_event('ping', handle_ping, namespace=NAMESPACE)
