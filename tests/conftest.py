import json
import os
import tempfile

# Keep log files out of the working tree; must run before mahoot is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='mahoot-logs-'))

import pytest

from mahoot import create_app
from mahoot.config import TestingConfig
from mahoot.services.account_registry import AccountRegistry
from mahoot.services.persistent_store import PersistentStore
from mahoot.services.user_service import UserService


@pytest.fixture
def users_file(tmp_path):
    return str(tmp_path / 'data' / 'users.json')


@pytest.fixture
def store(users_file):
    return PersistentStore(users_file)


@pytest.fixture
def registry(store):
    return AccountRegistry(store)


@pytest.fixture
def service(registry):
    return UserService(registry)


@pytest.fixture
def app(users_file):
    config_class = type('TmpConfig', (TestingConfig,), {'USERS_FILE': users_file})
    return create_app(config_class)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def alice(registry):
    return registry.register('alice', 'alice@example.com', 'secret123')


@pytest.fixture
def original_users_file(users_file):
    """Users file as written by the Node server; bob's game was posted without a percentage."""
    stats = {'quizzesCreated': 0, 'gamesPlayed': 0, 'averageScore': 0, 'highScore': 0}
    users = [
        {'id': 1, 'username': 'alice', 'email': 'alice@example.com', 'password': '-739593854',
         'stats': stats, 'createdAt': '2024-01-01T00:00:00.000Z', 'quizzes': [], 'gameHistory': []},
        {'id': 2, 'username': 'bob', 'email': 'bob@example.com', 'password': '-739593854',
         'stats': dict(stats, gamesPlayed=1), 'createdAt': '2024-01-02T00:00:00.000Z', 'quizzes': [],
         'gameHistory': [{'id': 3, 'quizId': 'quiz-1', 'date': '2024-01-02T00:01:00.000Z'}]},
    ]
    os.makedirs(os.path.dirname(users_file), exist_ok=True)
    with open(users_file, 'w', encoding='utf-8') as f:
        json.dump(users, f, indent=2)
    return users_file
