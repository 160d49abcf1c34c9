"""
API package.
"""
from career_ladder.api.routes import api_router
from career_ladder.api.deps import (
    get_current_user,
    get_session_context,
    require_admin,
)

__all__ = [
    "api_router",
    "get_current_user",
    "get_session_context",
    "require_admin",
]
