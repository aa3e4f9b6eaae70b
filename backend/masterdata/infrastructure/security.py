"""Password Hashing - SecretHasher implementation over werkzeug.security.

Invariants:
    - Plaintext secrets are never stored or logged
    - verify_secret never raises on a malformed hash; it returns False
"""

import logging

from werkzeug.security import check_password_hash, generate_password_hash

logger = logging.getLogger(__name__)

DEFAULT_METHOD = "scrypt"


class WerkzeugSecretHasher:
    """Salted one-way hashes in werkzeug's "method$salt$hash" format."""

    def __init__(self, method: str = DEFAULT_METHOD, salt_length: int = 16):
        self.method = method
        self.salt_length = salt_length

    def hash_secret(self, plaintext: str) -> str:
        return generate_password_hash(
            plaintext, method=self.method, salt_length=self.salt_length,
        )

    def verify_secret(self, plaintext: str, hashed: str) -> bool:
        try:
            return check_password_hash(hashed, plaintext)
        except ValueError as e:
            logger.warning(f"Unreadable password hash: {e}")
            return False
