from flask import Blueprint, current_app, jsonify

rooms = Blueprint('rooms', __name__)


@rooms.route('', methods=['GET'])
def list_rooms():
    """
    Returns the same room summaries pushed to sockets as ``room_list``.
    """
    registry = current_app.extensions['rooms']
    with registry.lock:
        return jsonify(registry.summaries())


@rooms.route('/<string:room_id>', methods=['GET'])
def get_room(room_id):
    """
    Returns a room's public state. The secret word and impostor are never exposed.
    """
    registry = current_app.extensions['rooms']
    with registry.lock:
        room = registry.get(room_id)
        if room is None:
            return jsonify({'error': 'Room not found'}), 404
        return jsonify(room.to_dict())
