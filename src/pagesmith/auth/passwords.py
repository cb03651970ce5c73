"""Admin password hashing and credential checks.

New hashes are argon2id (``argon2-cffi``). Verification also accepts
``$scrypt$n=N,r=R,p=P$salt$dk`` PHC strings computed with ``hashlib.scrypt``,
so a hash can be produced on a machine without argon2 tooling.
"""

import base64
import hashlib
import hmac
import logging

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from pagesmith.config import AuthConfig


logger = logging.getLogger(__name__)

_ARGON2_PREFIX = "$argon2"
_SCRYPT_PREFIX = "$scrypt$"


def hash_password(password: str) -> str:
    """Return an argon2id PHC hash of password."""
    if not password:
        raise ValueError("Password must not be empty.")
    return PasswordHasher().hash(password)


def _verify_scrypt(password: str, phc_hash: str) -> bool:
    # ['', 'scrypt', 'n=..,r=..,p=..', salt, dk]
    parts = phc_hash.split("$")
    if len(parts) != 5 or parts[1] != "scrypt":
        return False
    try:
        params = {}
        for param in parts[2].split(","):
            key, _, value = param.partition("=")
            params[key] = int(value)
        salt = base64.b64decode(parts[3])
        expected = base64.b64decode(parts[4])
        dk = hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt,
            n=params["n"],
            r=params["r"],
            p=params["p"],
            dklen=len(expected),
            maxmem=2**26,
        )
    except (KeyError, ValueError):
        return False
    return hmac.compare_digest(dk, expected)


def verify_password(password: str, phc_hash: str) -> bool:
    """True if password matches phc_hash. Raises ValueError for an unknown hash format."""
    if not password or not phc_hash:
        return False
    if phc_hash.startswith(_ARGON2_PREFIX):
        try:
            return PasswordHasher().verify(phc_hash, password)
        except (VerificationError, InvalidHashError):
            return False
    if phc_hash.startswith(_SCRYPT_PREFIX):
        return _verify_scrypt(password, phc_hash)
    raise ValueError(f"Unknown hash format: {phc_hash[:20]}...")


def check_credentials(username: str, password: str, config: AuthConfig) -> bool:
    """True only for the configured admin username with a matching password."""
    if not hmac.compare_digest(username.encode("utf-8"), config.admin_username.encode("utf-8")):
        logger.info("Login rejected: unknown username")
        return False
    try:
        ok = verify_password(password, config.admin_password_hash)
    except ValueError as e:
        logger.warning("Login rejected: %s", e)
        return False
    if not ok:
        logger.info("Login rejected: wrong password for %s", username)
    return ok
