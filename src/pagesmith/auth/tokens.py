"""Signed session tokens: `<base64(json payload)>.<hex hmac-sha256>`

The payload is ``{"username": str, "exp": int}`` where ``exp`` is an absolute
expiry in milliseconds since the epoch. Standard base64 (with ``=`` padding)
never contains ``.``, so the token splits unambiguously into two parts.

Verification never raises: any malformed, tampered, or expired token yields
``None``.
"""

import base64
import binascii
import hashlib
import hmac
import json
import logging
import time
from typing import Any, Optional

from pagesmith.config import AuthConfig


logger = logging.getLogger(__name__)

CLEAR_EXPIRES = "Thu, 01 Jan 1970 00:00:00 GMT"
COOKIE_ATTRIBUTES = "HttpOnly; Secure; SameSite=Strict; Path=/"


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def sign(payload: str, secret: bytes) -> str:
    return hmac.new(secret, payload.encode("ascii"), hashlib.sha256).hexdigest()


def issue_token(username: str, secret: bytes, ttl_ms: int, now: Optional[int] = None) -> str:
    """Mint a token for username expiring ttl_ms after now."""
    issued = now_ms() if now is None else now
    payload = json.dumps({"username": username, "exp": issued + ttl_ms}, separators=(",", ":"))
    encoded = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return f"{encoded}.{sign(encoded, secret)}"


def _decode_payload(encoded: str) -> Optional[dict[str, Any]]:
    try:
        data = json.loads(base64.b64decode(encoded, validate=True).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    if not isinstance(data.get("username"), str):
        return None
    exp = data.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, int):
        return None
    return data


def verify_token(token: Optional[str], secret: bytes, now: Optional[int] = None) -> Optional[dict[str, Any]]:
    """Return the payload of a valid, unexpired token, else None."""
    if not token:
        return None
    parts = token.split(".")
    if len(parts) != 2:
        logger.debug("Rejected session token: expected 2 parts, got %d", len(parts))
        return None
    encoded, signature = parts
    try:
        expected = sign(encoded, secret)
    except UnicodeEncodeError:
        return None
    if not hmac.compare_digest(signature.encode("utf-8"), expected.encode("ascii")):
        logger.debug("Rejected session token: signature mismatch")
        return None
    payload = _decode_payload(encoded)
    if payload is None:
        logger.debug("Rejected session token: malformed payload")
        return None
    if payload["exp"] <= (now_ms() if now is None else now):
        logger.debug("Rejected session token: expired for %s", payload["username"])
        return None
    return payload


class SessionCodec:
    """Issues and verifies session tokens with the secret and TTL from an AuthConfig."""

    def __init__(self, config: AuthConfig):
        self.config = config

    def issue(self, username: str, now: Optional[int] = None) -> str:
        return issue_token(username, self.config.secret, self.config.session_ttl_ms, now)

    def verify(self, token: Optional[str], now: Optional[int] = None) -> Optional[dict[str, Any]]:
        return verify_token(token, self.config.secret, now)

    def session_cookie(self, token: str) -> str:
        """Set-Cookie value carrying token."""
        return f"{self.config.cookie_name}={token}; {COOKIE_ATTRIBUTES}; Max-Age={self.config.max_age}"

    def clear_cookie(self) -> str:
        """Set-Cookie value that overwrites the session with an expired placeholder."""
        return f"{self.config.cookie_name}=; {COOKIE_ATTRIBUTES}; Expires={CLEAR_EXPIRES}"
