"""Stateless bearer tokens binding a session to a user id.

Tokens are HS256 JWTs signed with the server secret. Nothing is stored server
side: a token is valid until its ``exp`` claim passes.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError

from chirpy.core.settings import settings

__all__ = [
    "BEARER_PREFIX",
    "TokenService",
    "TokenError",
    "InvalidSignatureError",
    "TokenExpiredError",
    "MalformedTokenError",
    "extract_bearer_token",
]

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
_REQUIRED_CLAIMS = ("iss", "iat", "exp", "sub")
# Prefix of the JWTError python-jose raises for a verified payload that is not a JSON object.
_BAD_PAYLOAD_PREFIX = "Invalid payload string"


class TokenError(RuntimeError):
    """Base exception for token validation failures."""


class MalformedTokenError(TokenError):
    """Raised when the credential is not a well-formed token for this service."""


class InvalidSignatureError(TokenError):
    """Raised when the token signature does not verify under the server secret."""


class TokenExpiredError(TokenError):
    """Raised when the current time is outside the token's validity window."""


def extract_bearer_token(credential: str | None) -> str:
    """Strip the ``Bearer`` prefix and surrounding whitespace from a credential."""
    value = (credential or "").strip()
    if value.startswith(BEARER_PREFIX):
        value = value[len(BEARER_PREFIX):]
    return value.strip()


class TokenService:
    """Issues and validates signed, time-limited session tokens."""

    def __init__(
        self,
        secret: str | None = None,
        *,
        issuer: str | None = None,
        algorithm: str | None = None,
        default_lifetime_seconds: int | None = None,
    ) -> None:
        self._secret = secret if secret is not None else settings.jwt_secret
        if not self._secret:
            raise ValueError("A signing secret is required")
        self.issuer = issuer or settings.jwt_issuer
        self.algorithm = algorithm or settings.jwt_algorithm
        self.default_lifetime_seconds = (
            default_lifetime_seconds
            if default_lifetime_seconds is not None
            else settings.default_token_lifetime_seconds
        )

    def issue(self, user_id: int, lifetime_seconds: int | None = None) -> str:
        """Create a signed token for `user_id`.

        Args:
            user_id: Account identifier stored as the ``sub`` claim.
            lifetime_seconds: Seconds until expiry. Missing or non-positive
                values fall back to the configured default.

        Returns:
            The encoded JWT.
        """
        if not lifetime_seconds or lifetime_seconds <= 0:
            lifetime_seconds = self.default_lifetime_seconds
        issued_at = int(time.time())
        claims: dict[str, Any] = {
            "iss": self.issuer,
            "iat": issued_at,
            "exp": issued_at + lifetime_seconds,
            "sub": str(user_id),
        }
        token: str = jwt.encode(claims, self._secret, algorithm=self.algorithm)
        return token

    def validate(self, credential: str | None) -> int:
        """Return the user id asserted by a token.

        Args:
            credential: A raw token or an ``Authorization`` header value
                carrying the ``Bearer`` prefix.

        Raises:
            MalformedTokenError: The token cannot be parsed or has bad claims.
            InvalidSignatureError: The signature does not match.
            TokenExpiredError: The token is expired or not yet valid.
        """
        token = extract_bearer_token(credential)
        if not token:
            raise MalformedTokenError("Missing bearer token")

        try:
            header = jwt.get_unverified_header(token)
        except JWTError as err:
            logger.warning("Rejected token: malformed")
            raise MalformedTokenError("Token could not be parsed") from err
        if header.get("alg") != self.algorithm:
            logger.warning("Rejected token: unexpected algorithm")
            raise MalformedTokenError("Unexpected signing algorithm")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
            )
        except ExpiredSignatureError as err:
            logger.warning("Rejected token: expired")
            raise TokenExpiredError("Token has expired") from err
        except JWTClaimsError as err:
            logger.warning("Rejected token: invalid claims")
            raise MalformedTokenError(str(err)) from err
        except JWTError as err:
            if str(err).startswith(_BAD_PAYLOAD_PREFIX):
                logger.warning("Rejected token: payload is not a claims object")
                raise MalformedTokenError("Token payload is not a claims object") from err
            logger.warning("Rejected token: bad signature")
            raise InvalidSignatureError("Token signature is invalid") from err

        missing = [claim for claim in _REQUIRED_CLAIMS if claim not in payload]
        if missing:
            logger.warning("Rejected token: missing claims")
            raise MalformedTokenError(f"Token is missing claims: {', '.join(missing)}")

        if int(payload["iat"]) > int(time.time()):
            logger.warning("Rejected token: issued in the future")
            raise TokenExpiredError("Token is not valid yet")

        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as err:
            raise MalformedTokenError("Token subject is not a user id") from err
