"""Admin gate: session cookie -> verified payload or None"""

import logging
from typing import Any, Optional

from pagesmith.auth.tokens import SessionCodec


logger = logging.getLogger(__name__)


def parse_cookies(header: Optional[str]) -> dict[str, str]:
    """Parse a Cookie header. Each pair splits on its first '=' so base64 padding survives."""
    cookies: dict[str, str] = {}
    for pair in (header or "").split(";"):
        pair = pair.strip()
        if not pair:
            continue
        name, _, value = pair.partition("=")
        cookies[name.strip()] = value.strip()
    return cookies


class AdminGate:
    def __init__(self, codec: SessionCodec):
        self.codec = codec

    def authorize(self, cookie_header: Optional[str], now: Optional[int] = None) -> Optional[dict[str, Any]]:
        """Return the session payload when the request carries a valid session cookie, else None."""
        token = parse_cookies(cookie_header).get(self.codec.config.cookie_name)
        if not token:
            logger.debug("Admin access denied: no session cookie")
            return None
        payload = self.codec.verify(token, now)
        if payload is None:
            logger.info("Admin access denied: invalid or expired session")
        return payload
