"""
User Data Models

Contains user-related data structures and their JSON representation.
Persisted field names follow the camelCase layout of users.json.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

Number = Union[int, float]


@dataclass
class UserStats:
    """
    Derived user statistics.

    This is a cache over ``User.quizzes`` and ``User.game_history``; the
    stats aggregator is the only code that recomputes it from history.
    """
    quizzes_created: Number = 0
    games_played: Number = 0
    average_score: Number = 0
    high_score: Number = 0

    # JSON key -> attribute name
    FIELD_NAMES = {
        'quizzesCreated': 'quizzes_created',
        'gamesPlayed': 'games_played',
        'averageScore': 'average_score',
        'highScore': 'high_score',
    }

    def to_dict(self) -> Dict[str, Number]:
        return {key: getattr(self, attr) for key, attr in self.FIELD_NAMES.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UserStats':
        return cls(**{attr: data.get(key, 0) for key, attr in cls.FIELD_NAMES.items()})


@dataclass
class GameRecord:
    """One completed play-through of a quiz."""
    id: int
    quiz_id: Any
    score: Any
    max_score: Any
    percentage: Optional[Number]
    date: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'quizId': self.quiz_id,
            'score': self.score,
            'maxScore': self.max_score,
            'percentage': self.percentage,
            'date': self.date,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GameRecord':
        return cls(
            id=data['id'],
            quiz_id=data.get('quizId'),
            score=data.get('score'),
            max_score=data.get('maxScore'),
            percentage=data.get('percentage'),
            date=data.get('date'),
        )


@dataclass
class User:
    """User data model."""
    id: int
    username: str
    email: str
    password: str
    created_at: Optional[str]
    stats: UserStats = field(default_factory=UserStats)
    quizzes: List[Any] = field(default_factory=list)
    game_history: List[GameRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Full record as stored in users.json, password hash included."""
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'password': self.password,
            'stats': self.stats.to_dict(),
            'createdAt': self.created_at,
            'quizzes': list(self.quizzes),
            'gameHistory': [record.to_dict() for record in self.game_history],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        return cls(
            id=data['id'],
            username=data['username'],
            email=data['email'],
            password=data['password'],
            created_at=data.get('createdAt'),
            stats=UserStats.from_dict(data.get('stats') or {}),
            quizzes=list(data.get('quizzes') or []),
            game_history=[GameRecord.from_dict(r) for r in data.get('gameHistory') or []],
        )

    def to_public_dict(self) -> Dict[str, Any]:
        """Redacted projection returned to clients."""
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'stats': self.stats.to_dict(),
        }

    def to_admin_dict(self) -> Dict[str, Any]:
        """Admin listing view: no password, no histories."""
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'stats': self.stats.to_dict(),
            'createdAt': self.created_at,
        }
