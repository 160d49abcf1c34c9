"""Core module exports."""
from career_ladder.core.config import settings, get_settings
from career_ladder.core.database import Base, get_db, init_db, close_db, engine, async_session_maker
from career_ladder.core.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    verify_token_type,
)
from career_ladder.core.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    StoreUnavailableException,
    InvalidTokenException,
    InvalidIdentityTokenException,
    ConfigurationIncompleteException,
    UserNotFoundException,
    TeamNotFoundException,
    SkillNotFoundException,
    WaiverNotFoundException,
    LadderConfigNotFoundException,
    DomainAlreadyExistsException,
    LadderConfigExistsException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    "engine",
    "async_session_maker",
    # Security
    "create_access_token",
    "create_refresh_token",
    "decode_token",
    "verify_token_type",
    # Exceptions
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "StoreUnavailableException",
    "InvalidTokenException",
    "InvalidIdentityTokenException",
    "ConfigurationIncompleteException",
    "UserNotFoundException",
    "TeamNotFoundException",
    "SkillNotFoundException",
    "WaiverNotFoundException",
    "LadderConfigNotFoundException",
    "DomainAlreadyExistsException",
    "LadderConfigExistsException",
]
