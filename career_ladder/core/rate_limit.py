"""
Rate limiting configuration using slowapi.

Uses Redis as the backend by default so limits are shared across workers.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from career_ladder.core.config import settings


def _get_user_or_ip(request: Request) -> str:
    """Rate-limit key: signed-in user ID if the auth dependency set one, else client IP."""
    session = getattr(request.state, "session", None)
    if session is not None:
        return str(session.user_id)
    return get_remote_address(request)


limiter = Limiter(
    key_func=_get_user_or_ip,
    storage_uri=settings.limiter_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

# Rate limit strings for route decorators:
#   @limiter.limit(RATE_SIGN_IN)
RATE_SIGN_IN = "10/minute"  # identity token exchange
