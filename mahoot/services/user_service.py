"""
User Service

Public operation surface for accounts, quizzes and game history.
Every operation returns a result dictionary with a ``success`` flag; failures
carry an ``error`` message and an ``error_type`` ('validation', 'not_found'
or 'auth') that the HTTP layer maps to a status code.
"""

from typing import Any, Callable, Dict, Optional

from .account_registry import AccountRegistry
from .errors import MahootError
from .password_hasher import PasswordHasher
from .persistent_store import PersistentStore


class UserService:
    """
    Facade over the account registry for the HTTP controllers.
    """

    def __init__(self, registry: AccountRegistry):
        self.registry = registry

    @classmethod
    def from_file(cls, users_file: str, hash_scheme: str = 'legacy') -> 'UserService':
        """
        Build a service backed by a JSON users file.

        Args:
            users_file: Path of the users file (created on first save)
            hash_scheme: Password hash scheme for new passwords
        """
        registry = AccountRegistry(PersistentStore(users_file), PasswordHasher(hash_scheme))
        return cls(registry)

    @staticmethod
    def _run(operation: Callable[[], Any], wrap: Optional[Callable[[Any], Dict[str, Any]]] = None) -> Dict[str, Any]:
        try:
            value = operation()
        except MahootError as e:
            return {"success": False, "error": e.message, "error_type": e.error_type}

        if wrap is None:
            return {"success": True}
        return {"success": True, **wrap(value)}

    def register(self, username: str, email: str, password: str) -> Dict[str, Any]:
        """
        Register a new user.

        Returns:
            ``{"success": True, "user": {...}}`` or a validation failure
        """
        return self._run(lambda: self.registry.register(username, email, password),
                         lambda user: {"user": user})

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Check credentials and return the user's public data."""
        return self._run(lambda: self.registry.login(email, password),
                         lambda user: {"user": user})

    def get_user(self, user_id: int) -> Dict[str, Any]:
        return self._run(lambda: self.registry.get_by_id(user_id),
                         lambda user: {"user": user})

    def get_user_by_email(self, email: str) -> Dict[str, Any]:
        return self._run(lambda: self.registry.get_by_email(email),
                         lambda user: {"user": user})

    def update_stats(self, user_id: int, stats: Dict[str, Any]) -> Dict[str, Any]:
        """
        Overwrite cached stats fields. Does not touch the game history.
        """
        return self._run(lambda: self.registry.update_stats(user_id, stats),
                         lambda user: {"user": user})

    def add_quiz(self, user_id: int, quiz_id: Any) -> Dict[str, Any]:
        return self._run(lambda: self.registry.add_quiz(user_id, quiz_id))

    def add_game_history(self, user_id: int, game_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._run(lambda: self.registry.add_game_history(user_id, game_data))

    def get_all_users(self) -> Dict[str, Any]:
        """Admin listing with a user count."""
        users = self.registry.list()
        return {"success": True, "users": users, "count": len(users)}

    def delete_user(self, user_id: int) -> Dict[str, Any]:
        return self._run(lambda: self.registry.delete(user_id))

    def clear_all_users(self) -> Dict[str, Any]:
        """Irreversibly remove every user."""
        self.registry.reset()
        return {"success": True}

    def user_count(self) -> int:
        return self.registry.count()


# Global service instance
_user_service = None


def get_user_service() -> Optional[UserService]:
    """Get the global user service instance."""
    return _user_service


def initialize_user_service(users_file: str, hash_scheme: str = 'legacy') -> UserService:
    """Initialize the global user service instance."""
    global _user_service
    _user_service = UserService.from_file(users_file, hash_scheme)
    return _user_service
