from impostor.models import Round


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_health_counts_rooms(client, registry):
    registry.create_room('Desert', 'sid-ali', 'Ali')
    data = client.get('/health').get_json()
    assert data['status'] == 'ok'
    assert data['rooms'] == 1


def test_list_rooms(client, registry):
    assert client.get('/api/rooms').get_json() == []
    room_id = registry.create_room('Desert', 'sid-ali', 'Ali')
    registry.join_room(room_id, 'sid-sara', 'Sara')
    res = client.get('/api/rooms')
    assert res.status_code == 200
    assert res.get_json() == [{'id': room_id, 'name': 'Desert', 'member_count': 2}]


def test_room_detail_hides_round_secrets(client, registry):
    room_id = registry.create_room('Desert', 'sid-ali', 'Ali')
    registry.get(room_id).round = Round(word='cactus', impostor='sid-ali')
    res = client.get(f'/api/rooms/{room_id.lower()}')
    assert res.status_code == 200
    data = res.get_json()
    assert data['room_id'] == room_id
    assert data['round_active'] is True
    assert data['owner'] == 'sid-ali'
    assert 'cactus' not in res.get_data(as_text=True)


def test_room_detail_not_found(client):
    res = client.get('/api/rooms/ZZZZ')
    assert res.status_code == 404
    assert res.get_json() == {'error': 'Room not found'}


def test_socket_created_room_is_listed(client, connect):
    owner, _ = connect()
    owner.emit('create_room', {'room_name': 'Desert', 'player_name': 'Ali'})
    rooms = client.get('/api/rooms').get_json()
    assert [r['name'] for r in rooms] == ['Desert']
