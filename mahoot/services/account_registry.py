"""
Account Registry

Owns the in-memory user collection. Enforces unique emails and usernames,
verifies credentials, and writes the whole collection through to the
persistent store after every mutation.
"""

import threading
from typing import Any, Dict, List, Optional

from ..models.user import GameRecord, User, UserStats
from ..utils.helpers import IdGenerator, is_finite_number, utc_timestamp
from ..utils.server_logger import server_logger
from .errors import InvalidCredential, NotFoundError, PersistenceError, UserNotFound, ValidationError
from .password_hasher import PasswordHasher
from .persistent_store import PersistentStore
from .stats_aggregator import StatsAggregator

MIN_PASSWORD_LENGTH = 6


class AccountRegistry:
    """
    In-memory user collection backed by a PersistentStore.

    Every public method runs under a single re-entrant lock so that
    concurrent requests cannot interleave their read-modify-write sequences.
    """

    def __init__(self,
                 store: PersistentStore,
                 hasher: Optional[PasswordHasher] = None,
                 aggregator: Optional[StatsAggregator] = None):
        self.store = store
        self.hasher = hasher or PasswordHasher()
        self.aggregator = aggregator or StatsAggregator()
        self._lock = threading.RLock()
        self.users: List[User] = store.load()
        self._ids = IdGenerator(self._all_ids())

    def _all_ids(self) -> List[int]:
        ids = [user.id for user in self.users]
        ids.extend(record.id for user in self.users for record in user.game_history)
        return [i for i in ids if is_finite_number(i)]

    def _flush(self):
        """Write the collection through; a failed write is logged, never raised."""
        try:
            self.store.save(self.users)
        except PersistenceError as e:
            server_logger.log_store_event('save_failed', error=e, path=self.store.path, users=len(self.users))

    def _find_by_id(self, user_id: int) -> User:
        for user in self.users:
            if user.id == user_id:
                return user
        raise NotFoundError()

    def _find_by_email(self, email: str) -> Optional[User]:
        return next((user for user in self.users if user.email == email), None)

    def register(self, username: str, email: str, password: str) -> Dict[str, Any]:
        """
        Create a new user with zeroed stats.

        Checks run in a fixed order and the first failure wins: missing field,
        short password, duplicate email, duplicate username.

        Returns:
            Public projection of the new user

        Raises:
            ValidationError: If any check fails
        """
        with self._lock:
            if not username or not email or not password:
                raise ValidationError('All fields required')

            if not all(isinstance(value, str) for value in (username, email, password)):
                raise ValidationError('Username, email and password must be strings')

            if len(password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')

            if any(u.email == email for u in self.users):
                raise ValidationError('Email already registered')

            if any(u.username == username for u in self.users):
                raise ValidationError('Username already taken')

            user = User(
                id=self._ids.next_id(),
                username=username,
                email=email,
                password=self.hasher.hash(password),
                created_at=utc_timestamp(),
            )

            self.users.append(user)
            self._flush()

            return user.to_public_dict()

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """
        Verify credentials for the account registered under email.

        Raises:
            UserNotFound: If no account uses this email
            InvalidCredential: If the password does not match
        """
        with self._lock:
            user = self._find_by_email(email)
            if user is None:
                raise UserNotFound()

            if not isinstance(password, str) or not self.hasher.verify(password, user.password):
                raise InvalidCredential()

            return user.to_public_dict()

    def get_by_id(self, user_id: int) -> Dict[str, Any]:
        with self._lock:
            return self._find_by_id(user_id).to_public_dict()

    def get_by_email(self, email: str) -> Dict[str, Any]:
        with self._lock:
            user = self._find_by_email(email)
            if user is None:
                raise NotFoundError()
            return user.to_public_dict()

    def update_stats(self, user_id: int, partial_stats: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge caller-supplied values into the user's stats.

        This writes the cached stats directly and does not consult the game
        history, so the two can disagree afterwards.

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If partial_stats is not a mapping of known numeric fields
        """
        with self._lock:
            user = self._find_by_id(user_id)

            if not isinstance(partial_stats, dict):
                raise ValidationError('Stats must be an object')

            unknown = [key for key in partial_stats if key not in UserStats.FIELD_NAMES]
            if unknown:
                raise ValidationError(f"Unknown stats fields: {', '.join(sorted(map(str, unknown)))}")

            for key, value in partial_stats.items():
                if not is_finite_number(value):
                    raise ValidationError(f"Stats field '{key}' must be a number")

            for key, value in partial_stats.items():
                setattr(user.stats, UserStats.FIELD_NAMES[key], value)

            self._flush()
            return user.to_public_dict()

    def add_quiz(self, user_id: int, quiz_id: Any):
        """
        Record that the user authored quiz_id. Adding a known quiz is a no-op.

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If quiz_id is missing
        """
        with self._lock:
            user = self._find_by_id(user_id)

            if quiz_id is None:
                raise ValidationError('quizId is required')

            if quiz_id not in user.quizzes:
                user.quizzes.append(quiz_id)
                self.aggregator.sync_quizzes_created(user)
                self._flush()

    def add_game_history(self, user_id: int, game_data: Dict[str, Any]):
        """
        Append a completed game and recompute the history-derived stats.

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If game_data has no numeric percentage
        """
        with self._lock:
            user = self._find_by_id(user_id)

            if not isinstance(game_data, dict):
                raise ValidationError('Game data must be an object')

            percentage = game_data.get('percentage')
            if not is_finite_number(percentage):
                raise ValidationError('percentage must be a number')

            record = GameRecord(
                id=self._ids.next_id(),
                quiz_id=game_data.get('quizId'),
                score=game_data.get('score'),
                max_score=game_data.get('maxScore'),
                percentage=percentage,
                date=utc_timestamp(),
            )

            self.aggregator.recompute(user, record)
            self._flush()

    def list(self) -> List[Dict[str, Any]]:
        """Admin view of every user, without passwords or histories."""
        with self._lock:
            return [user.to_admin_dict() for user in self.users]

    def delete(self, user_id: int):
        """
        Remove a user. Its email and username can be registered again at once.

        Raises:
            NotFoundError: If the user does not exist
        """
        with self._lock:
            user = self._find_by_id(user_id)
            self.users.remove(user)
            self._flush()

    def reset(self):
        """Drop every user and persist the empty collection."""
        with self._lock:
            self.users = []
            self._flush()

    def count(self) -> int:
        with self._lock:
            return len(self.users)
