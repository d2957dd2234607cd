"""
Service Errors

Exception types raised by the account registry and persistent store.
The user service translates them into result dictionaries for the HTTP layer.
"""


class MahootError(Exception):
    """Base class for all account store errors."""

    error_type = 'error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MahootError):
    """Missing or malformed input, or a policy violation such as a duplicate key."""

    error_type = 'validation'


class NotFoundError(MahootError):
    """No user record matches the given id or email."""

    error_type = 'not_found'

    def __init__(self, message: str = 'User not found'):
        super().__init__(message)


class AuthError(MahootError):
    """Credential verification failed."""

    error_type = 'auth'


class UserNotFound(AuthError, NotFoundError):
    """Login attempted with an email that is not registered."""

    error_type = 'not_found'

    def __init__(self, message: str = 'User not found'):
        super().__init__(message)


class InvalidCredential(AuthError):
    """Stored password hash does not match the supplied password."""

    def __init__(self, message: str = 'Invalid password'):
        super().__init__(message)


class PersistenceError(MahootError):
    """Writing the user collection to disk failed."""

    error_type = 'persistence'
