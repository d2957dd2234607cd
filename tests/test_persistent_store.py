import json

import pytest

from mahoot.models.user import GameRecord, User, UserStats
from mahoot.services.errors import PersistenceError
from mahoot.services.persistent_store import PersistentStore


def sample_user():
    return User(
        id=1700000000000,
        username='alice',
        email='alice@example.com',
        password='-739593854',
        created_at='2024-01-01T10:00:00.000Z',
        stats=UserStats(quizzes_created=1, games_played=1, average_score=75, high_score=75),
        quizzes=['quiz-1'],
        game_history=[GameRecord(id=1700000000001, quiz_id='quiz-1', score=3, max_score=4,
                                 percentage=75, date='2024-01-01T10:05:00.000Z')],
    )


def test_missing_file_loads_empty(store):
    assert store.load() == []


def test_save_creates_directory_and_writes_json_array(store, users_file):
    store.save([sample_user()])

    with open(users_file, encoding='utf-8') as f:
        data = json.load(f)

    assert data == [{
        'id': 1700000000000,
        'username': 'alice',
        'email': 'alice@example.com',
        'password': '-739593854',
        'stats': {'quizzesCreated': 1, 'gamesPlayed': 1, 'averageScore': 75, 'highScore': 75},
        'createdAt': '2024-01-01T10:00:00.000Z',
        'quizzes': ['quiz-1'],
        'gameHistory': [{
            'id': 1700000000001, 'quizId': 'quiz-1', 'score': 3, 'maxScore': 4,
            'percentage': 75, 'date': '2024-01-01T10:05:00.000Z'
        }],
    }]


def test_round_trip(store):
    users = [sample_user(), User(id=2, username='bob', email='bob@example.com', password='97',
                                 created_at='2024-02-01T00:00:00.000Z')]

    store.save(users)

    assert store.load() == users


@pytest.mark.parametrize('content', [
    '',
    '   \n',
    '{not json',
    '{"id": 1}',
    '[1, 2, 3]',
    '[{"id": 1, "username": "x"}]',
])
def test_unparseable_file_loads_empty(store, users_file, content):
    store.save([])
    with open(users_file, 'w', encoding='utf-8') as f:
        f.write(content)

    assert store.load() == []


def test_save_failure_raises_persistence_error(tmp_path):
    blocker = tmp_path / 'blocker'
    blocker.write_text('not a directory')
    store = PersistentStore(str(blocker / 'users.json'))

    with pytest.raises(PersistenceError):
        store.save([sample_user()])


def test_loads_records_missing_optional_game_fields(store, original_users_file):
    users = store.load()

    assert [u.email for u in users] == ['alice@example.com', 'bob@example.com']
    assert users[1].game_history[0].percentage is None
    assert users[1].game_history[0].score is None
