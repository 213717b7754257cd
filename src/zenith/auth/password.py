"""Password hashing utilities.

Learn: Uses bcrypt for secure password hashing. bcrypt automatically
handles salting and is resistant to rainbow table attacks.
The work factor (rounds=12) takes ~100ms per hash on modern hardware.
Tests lower it through ZENITH_BCRYPT_ROUNDS to keep the suite fast.

bcrypt only reads the first 72 bytes of its input, so every password is
first reduced to a base64-encoded SHA-256 digest (44 bytes). Two long
passphrases that share a 72-byte prefix still hash differently.
"""

import base64
import hashlib

import bcrypt

DEFAULT_ROUNDS = 12


def _prehash(password: str) -> bytes:
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password with bcrypt.

    Learn: bcrypt includes a random salt automatically and produces
    hashes starting with "$2b$", so hashing the same password twice
    gives two different digests.
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_prehash(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash.

    The salt and cost are read back from the digest itself. checkpw
    compares in constant time. A malformed digest verifies as False.
    """
    try:
        return bcrypt.checkpw(_prehash(password), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False
