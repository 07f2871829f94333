from flask import Blueprint, jsonify

from arcade import registry

rooms = Blueprint('rooms', __name__)


@rooms.route('', methods=['GET'])
def list_rooms():
    summaries = []
    for room in registry.rooms():
        with room.lock:
            summaries.append(room.summary())
    return jsonify(summaries)


@rooms.route('/<string:room_code>/state', methods=['GET'])
def get_room_state(room_code):
    room = registry.get(room_code)
    if room is None:
        return jsonify({'error': 'Room not found'}), 404
    with room.lock:
        payload = room.to_dict()
    return jsonify(payload)
