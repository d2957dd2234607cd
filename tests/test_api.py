import json


def register(client, username='alice', email='alice@example.com', password='secret123', confirm=None):
    return client.post('/api/auth/register', json={
        'username': username,
        'email': email,
        'password': password,
        'passwordConfirm': password if confirm is None else confirm,
    })


def test_register_created(client):
    r = register(client)

    assert r.status_code == 201
    body = r.get_json()
    assert body['success'] is True
    assert body['user']['username'] == 'alice'
    assert 'password' not in body['user']


def test_register_password_mismatch(client):
    r = register(client, confirm='different')

    assert r.status_code == 400
    assert r.get_json() == {'success': False, 'error': 'Passwords do not match'}


def test_register_duplicate_email(client):
    register(client)
    r = register(client, username='alice2')

    assert r.status_code == 400
    assert r.get_json()['error'] == 'Email already registered'


def test_login(client):
    user = register(client).get_json()['user']

    ok = client.post('/api/auth/login', json={'email': 'alice@example.com', 'password': 'secret123'})
    assert ok.status_code == 200
    assert ok.get_json()['user'] == user

    wrong = client.post('/api/auth/login', json={'email': 'alice@example.com', 'password': 'nope-nope'})
    assert wrong.status_code == 401
    assert wrong.get_json()['error'] == 'Invalid password'

    unknown = client.post('/api/auth/login', json={'email': 'x@example.com', 'password': 'secret123'})
    assert unknown.status_code == 401
    assert unknown.get_json()['error'] == 'User not found'

    missing = client.post('/api/auth/login', json={'email': 'alice@example.com'})
    assert missing.status_code == 400
    assert missing.get_json()['error'] == 'Email and password required'


def test_user_lookup(client):
    user = register(client).get_json()['user']

    by_id = client.get(f"/api/users/{user['id']}")
    assert by_id.status_code == 200
    assert by_id.get_json()['user'] == user

    by_email = client.get('/api/users/email/alice@example.com')
    assert by_email.status_code == 200
    assert by_email.get_json()['user'] == user

    assert client.get('/api/users/1').status_code == 404
    assert client.get('/api/users/email/nobody@example.com').status_code == 404


def test_stats_quiz_and_game_history(client):
    user_id = register(client).get_json()['user']['id']

    for _ in range(2):
        r = client.post(f'/api/users/{user_id}/quiz', json={'quizId': 'quiz-1'})
        assert r.status_code == 200
        assert r.get_json() == {'success': True}

    for percentage in (80, 100, 60, 71):
        r = client.post(f'/api/users/{user_id}/gamehistory',
                        json={'quizId': 'quiz-1', 'score': percentage, 'maxScore': 100, 'percentage': percentage})
        assert r.status_code == 200

    stats = client.get(f'/api/users/{user_id}').get_json()['user']['stats']
    assert stats == {'quizzesCreated': 1, 'gamesPlayed': 4, 'averageScore': 78, 'highScore': 100}

    r = client.put(f'/api/users/{user_id}/stats', json={'highScore': 5})
    assert r.status_code == 200
    assert r.get_json()['user']['stats']['highScore'] == 5

    bad = client.put(f'/api/users/{user_id}/stats', json={'nonsense': 5})
    assert bad.status_code == 400
    assert bad.get_json()['error_type'] == 'validation'

    assert client.post('/api/users/1/quiz', json={'quizId': 'x'}).status_code == 400
    assert client.post('/api/users/1/gamehistory', json={'percentage': 1}).status_code == 400


def test_admin_endpoints(client, users_file):
    alice = register(client).get_json()['user']
    register(client, username='bob', email='bob@example.com')

    listing = client.get('/api/admin/users').get_json()
    assert listing['success'] is True
    assert listing['count'] == 2
    assert set(listing['users'][0]) == {'id', 'username', 'email', 'stats', 'createdAt'}

    assert client.delete(f"/api/admin/users/{alice['id']}").status_code == 200
    assert client.delete(f"/api/admin/users/{alice['id']}").status_code == 404
    assert client.get(f"/api/users/{alice['id']}").status_code == 404

    r = client.post('/api/admin/reset')
    assert r.status_code == 200
    assert r.get_json() == {'success': True}
    assert client.get('/api/admin/users').get_json() == {'success': True, 'users': [], 'count': 0}

    with open(users_file, encoding='utf-8') as f:
        assert json.load(f) == []


def test_health(client):
    register(client)

    body = client.get('/api/health').get_json()

    assert body['success'] is True
    assert body['usersCount'] == 1
    assert body['timestamp'].endswith('Z')


def test_unknown_endpoint(client):
    r = client.get('/api/does-not-exist')

    assert r.status_code == 404
    assert r.get_json() == {
        'success': False,
        'error': 'Endpoint not found',
        'path': '/api/does-not-exist',
        'method': 'GET'
    }


def test_data_survives_app_restart(app, client, users_file):
    from mahoot import create_app
    from mahoot.config import TestingConfig

    user = register(client).get_json()['user']

    config_class = type('TmpConfig', (TestingConfig,), {'USERS_FILE': users_file})
    restarted = create_app(config_class).test_client()

    r = restarted.post('/api/auth/login', json={'email': 'alice@example.com', 'password': 'secret123'})
    assert r.status_code == 200
    assert r.get_json()['user'] == user
