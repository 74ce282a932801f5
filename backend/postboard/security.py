"""
Postboard Backend — Password Hashing
======================================

What:  One-way hash-and-verify for user passwords.
Why:   The credential store must never hold plaintext passwords.
How:   passlib's CryptContext produces salted hashes in modular crypt format
       (e.g. `$pbkdf2-sha256$29000$<salt>$<checksum>`) and verifies them
       with a constant-time comparison.
Who:   Called by UserService: hash before the insert, verify on login.

The scheme and cost come from settings so tests can run with a cheap
iteration count. Hashes produced under an older configuration still
verify: CryptContext reads the scheme and rounds from the stored string.
"""

from passlib.context import CryptContext

from postboard.config import settings


def build_password_context(scheme: str, rounds: int) -> CryptContext:
    """Creates a CryptContext whose default scheme uses the given cost."""
    return CryptContext(
        schemes=[scheme],
        deprecated="auto",
        **{f"{scheme}__default_rounds": rounds},
    )


_pwd_context = build_password_context(
    settings.password_hash_scheme,
    settings.password_hash_rounds,
)


def hash_password(password: str) -> str:
    """Returns a salted one-way hash of `password`."""
    return _pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """
    Checks `password` against a stored hash.

    Returns False (never raises) for hashes that cannot be parsed, so a
    corrupt row reads as a credential mismatch instead of a server error.
    """
    try:
        return _pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        return False
