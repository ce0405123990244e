"""
Password hashing.

pbkdf2_sha256 is used for new hashes; bcrypt hashes imported from the
previous system still verify and are flagged for rehash.
"""

from passlib.context import CryptContext


pwd_context = CryptContext(
    schemes=["pbkdf2_sha256", "bcrypt"],
    deprecated="auto",
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """False for a wrong password or an unrecognised hash format."""
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        return False
