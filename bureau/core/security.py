"""Signing and verification of bearer session tokens (JWT)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

from jose import JWTError, jwt

from bureau.core.config import Settings
from bureau.core.timeutils import utcnow


class TokenError(Exception):
    """Base class for token verification failures."""


class TokenInvalidError(TokenError):
    """Malformed token, unknown algorithm or signature mismatch."""


class TokenExpiredError(TokenError):
    """Well-formed and correctly signed, but past its expiry."""


@dataclass(frozen=True, slots=True)
class TokenClaims:
    account_id: str
    expires_at: datetime


class JwtTokenIssuer:
    """Issues HMAC-signed JWTs whose subject is an account id."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, clock: Callable[[], datetime] = utcnow) -> "JwtTokenIssuer":
        return cls(settings.secret_key, settings.algorithm, clock)

    def sign(self, account_id: str, ttl: timedelta) -> str:
        issued_at = self._clock()
        payload = {
            "sub": account_id,
            "iat": issued_at,
            "exp": issued_at + ttl,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        # expiry is checked below against the issuer's own clock
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            raise TokenInvalidError("token could not be verified") from exc

        account_id = payload.get("sub")
        expires_at = payload.get("exp")
        if not isinstance(account_id, str) or not account_id or not isinstance(expires_at, (int, float)):
            raise TokenInvalidError("token is missing required claims")
        claims = TokenClaims(
            account_id=account_id,
            expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc),
        )
        if claims.expires_at <= self._clock():
            raise TokenExpiredError("token expired")
        return claims


__all__ = [
    "JwtTokenIssuer",
    "TokenClaims",
    "TokenError",
    "TokenExpiredError",
    "TokenInvalidError",
]
