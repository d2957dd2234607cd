"""
Password Hashing

Two schemes are supported:

- ``legacy``: the 32-bit string hash used by existing users.json files
  (``h = h * 31 + code_unit`` over the UTF-16 code units, wrapped to a signed
  32-bit integer and stored as its decimal string). It is not a secure hash;
  it is kept so that previously stored passwords still verify.
- ``bcrypt``: salted bcrypt hashes for new passwords.

Verification detects the scheme from the stored value, so a file may mix both.
"""

import bcrypt

SCHEMES = ('legacy', 'bcrypt')

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def legacy_hash(password: str) -> str:
    """
    Hash a password with the legacy 32-bit string hash.

    Args:
        password: Plain text password

    Returns:
        Signed 32-bit hash as a decimal string
    """
    encoded = password.encode('utf-16-le', 'surrogatepass')
    result = 0
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        result = _to_int32((result << 5) - result + code_unit)
    return str(result)


def is_bcrypt_hash(hashed_password: str) -> bool:
    return hashed_password.startswith(('$2a$', '$2b$', '$2y$'))


class PasswordHasher:
    """Hashes new passwords with the configured scheme and verifies stored ones."""

    def __init__(self, scheme: str = 'legacy'):
        if scheme not in SCHEMES:
            raise ValueError(f"Unknown password hash scheme '{scheme}', expected one of {SCHEMES}")
        self.scheme = scheme

    def hash(self, password: str) -> str:
        """
        Hash a password using the configured scheme.

        Args:
            password: Plain text password

        Returns:
            Hashed password as string
        """
        if self.scheme == 'bcrypt':
            hashed = bcrypt.hashpw(self._bcrypt_bytes(password), bcrypt.gensalt())
            return hashed.decode('utf-8')
        return legacy_hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a password against its stored hash.

        Args:
            password: Plain text password
            hashed_password: Stored hashed password, in either scheme

        Returns:
            True if password matches, False otherwise
        """
        if is_bcrypt_hash(hashed_password):
            try:
                return bcrypt.checkpw(self._bcrypt_bytes(password), hashed_password.encode('utf-8'))
            except ValueError:
                # Malformed stored hash
                return False
        return legacy_hash(password) == hashed_password

    @staticmethod
    def _bcrypt_bytes(password: str) -> bytes:
        return password.encode('utf-8')[:BCRYPT_MAX_BYTES]
