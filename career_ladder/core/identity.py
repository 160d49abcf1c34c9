"""
Identity provider ID-token verification.

Two modes:
- IDENTITY_JWKS_URL set: RS256 (or configured) tokens verified against the
  provider's published JWKS, fetched with httpx and cached per process.
- otherwise: HS256 tokens signed with IDENTITY_SHARED_SECRET (development
  and tests, where tokens are minted locally).
"""
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from jose import JWTError, jwt

from career_ladder.core.config import Settings, settings as default_settings
from career_ladder.core.exceptions import APIException, InvalidIdentityTokenException
from career_ladder.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class IdentityClaims:
    """What the provider tells us about the signed-in person."""

    subject: str
    email: Optional[str] = None
    name: Optional[str] = None


class IdentityVerifier:
    """Verifies provider ID tokens and extracts the identity claims."""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings
        self._jwks: Optional[dict[str, Any]] = None

    async def verify(self, id_token: str) -> IdentityClaims:
        """
        Verify an ID token.

        Raises:
            InvalidIdentityTokenException: bad signature, audience, issuer,
                expiry, or missing subject.
        """
        if self.config.identity_jwks_url:
            key: Any = await self._get_jwks()
            algorithms = self.config.identity_algorithms
        else:
            key = self.config.identity_shared_secret
            algorithms = ["HS256"]

        try:
            claims = jwt.decode(
                id_token,
                key,
                algorithms=algorithms,
                audience=self.config.identity_audience,
                issuer=self.config.identity_issuer,
                options={"verify_at_hash": False},
            )
        except JWTError as exc:
            logger.info("identity_token_rejected", reason=str(exc))
            raise InvalidIdentityTokenException()

        subject = claims.get("sub")
        if not subject:
            raise InvalidIdentityTokenException()

        return IdentityClaims(
            subject=str(subject),
            email=claims.get("email"),
            name=claims.get("name"),
        )

    async def _get_jwks(self) -> dict[str, Any]:
        if self._jwks is not None:
            return self._jwks

        try:
            async with httpx.AsyncClient(
                timeout=self.config.identity_http_timeout_seconds
            ) as client:
                response = await client.get(self.config.identity_jwks_url)
                response.raise_for_status()
                self._jwks = response.json()
        except httpx.HTTPError as exc:
            logger.error("jwks_fetch_failed", url=self.config.identity_jwks_url, error=str(exc))
            raise APIException(
                503,
                "IDENTITY_PROVIDER_UNAVAILABLE",
                "Sign-in is temporarily unavailable. Please try again.",
                retryable=True,
            )

        return self._jwks


identity_verifier = IdentityVerifier()
