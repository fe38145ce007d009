import re
import time
from dataclasses import dataclass
from typing import Callable, Optional

import jwt

from ..errors import AuthError
from .logging import log_event


_BEARER_RE = re.compile(r"^Bearer (\S+)$")


@dataclass(frozen=True)
class IssuedToken:
    access_token: str
    expires_in: str


class TokenService:
    """Stateless HS256 bearer tokens carrying a customer id."""

    algorithm = "HS256"

    def __init__(self, secret_key: str, ttl_seconds: int, expires_in: Optional[str] = None, clock: Callable[[], float] = time.time):
        if not secret_key:
            raise ValueError("secret_key required")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be > 0")
        self._secret_key = secret_key
        self._ttl_seconds = int(ttl_seconds)
        self._expires_in = expires_in or f"{self._ttl_seconds}s"
        self._clock = clock

    def issue(self, customer_id: int) -> IssuedToken:
        now = int(self._clock())
        payload = {
            "customer_id": int(customer_id),
            "iat": now,
            "exp": now + self._ttl_seconds,
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self.algorithm)
        return IssuedToken(access_token=f"Bearer {token}", expires_in=self._expires_in)

    def verify(self, credential: Optional[str]) -> int:
        """Return the customer id of a ``Bearer <jwt>`` credential."""
        if not isinstance(credential, str) or not credential.strip():
            log_event("warning", "auth.rejected", reason="missing")
            raise AuthError(AuthError.INVALID_SCHEME, "Authorization code is empty", code="AUT_01")
        m = _BEARER_RE.match(credential.strip())
        if not m:
            log_event("warning", "auth.rejected", reason="scheme")
            raise AuthError(AuthError.INVALID_SCHEME)
        try:
            payload = jwt.decode(
                m.group(1),
                self._secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            log_event("info", "auth.rejected", reason="expired")
            raise AuthError(AuthError.INVALID_OR_EXPIRED, "The token has expired") from None
        except jwt.PyJWTError:
            log_event("warning", "auth.rejected", reason="invalid")
            raise AuthError(AuthError.INVALID_OR_EXPIRED) from None

        customer_id = payload.get("customer_id")
        if isinstance(customer_id, bool) or not isinstance(customer_id, int) or customer_id <= 0:
            log_event("warning", "auth.rejected", reason="payload")
            raise AuthError(AuthError.INVALID_OR_EXPIRED)
        return customer_id
