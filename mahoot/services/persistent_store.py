"""
Persistent Store

Whole-collection JSON persistence for user records. The file is a best-effort
snapshot of the in-memory collection: it is read once at startup and fully
rewritten after every mutation.
"""

import json
import os
from typing import List

from ..models.user import User
from ..utils.server_logger import server_logger
from .errors import PersistenceError


class PersistentStore:
    """
    Loads and saves the user collection as a JSON array.

    Attributes:
        path: Location of the users file
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> List[User]:
        """
        Read every user record from the users file.

        A missing, empty, unreadable or malformed file yields an empty list;
        the problem is logged rather than raised.
        """
        if not os.path.exists(self.path):
            server_logger.log_store_event('load', path=self.path, users=0, file_exists=False)
            return []

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = f.read()
            if not data.strip():
                return []

            records = json.loads(data)
            if not isinstance(records, list):
                raise ValueError("users file must contain a JSON array")

            users = [User.from_dict(record) for record in records]

        except (OSError, ValueError, KeyError, TypeError) as e:
            server_logger.log_store_event('load_failed', error=e, path=self.path)
            return []

        server_logger.log_store_event('load', path=self.path, users=len(users))
        return users

    def save(self, users: List[User]):
        """
        Overwrite the users file with the full collection.

        Raises:
            PersistenceError: If the file cannot be written
        """
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            payload = json.dumps([user.to_dict() for user in users], indent=2, ensure_ascii=False)
            with open(self.path, 'w', encoding='utf-8') as f:
                f.write(payload)

        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"Failed to save users to {self.path}: {e}") from e
