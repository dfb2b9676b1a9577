"""Password hashing (PBKDF2-SHA256)."""

import hashlib
import hmac
import secrets

HASH_PREFIX = "pbkdf2:sha256:"
DEFAULT_ITERATIONS = 100000


def hash_password(password: str, iterations: int = DEFAULT_ITERATIONS) -> str:
    """Hash a password using PBKDF2-SHA256 with a random salt.

    Returns:
        Encoded hash of the form ``pbkdf2:sha256:<iterations>$<salt>$<hex>``
    """
    salt = secrets.token_hex(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    return f"{HASH_PREFIX}{iterations}${salt}${dk.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash.

    Malformed or foreign-format hashes never verify.
    """
    if not password_hash.startswith(HASH_PREFIX):
        return False
    parts = password_hash.split("$")
    if len(parts) != 3:
        return False
    header, salt, stored_hash = parts
    try:
        iterations = int(header[len(HASH_PREFIX):])
    except ValueError:
        return False
    if iterations <= 0:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    return hmac.compare_digest(dk.hex(), stored_hash)
