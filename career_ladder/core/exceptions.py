"""
Custom exceptions for the application.
All API exceptions inherit from APIException so they render the same way.
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all API errors.

    ``retryable`` tells the client whether repeating the same request
    (a manual retry) can succeed.
    """

    retryable: bool = False

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
        retryable: Optional[bool] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        if retryable is not None:
            self.retryable = retryable
        super().__init__(self.message)


class BadRequestException(APIException):
    """400 Bad Request"""

    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST"):
        super().__init__(400, code, message)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class ForbiddenException(APIException):
    """403 Forbidden"""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(403, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(
        self,
        message: str = "Resource conflict",
        code: str = "CONFLICT",
        retryable: bool = False,
    ):
        super().__init__(409, code, message, retryable=retryable)


class StoreUnavailableException(APIException):
    """503 - a database call failed. The client may retry manually."""

    retryable = True

    def __init__(
        self,
        message: str = "Failed to load data. Please try again.",
        code: str = "STORE_UNAVAILABLE",
    ):
        super().__init__(503, code, message)


# Authentication specific exceptions
class InvalidTokenException(UnauthorizedException):
    """Token is invalid"""

    def __init__(self):
        super().__init__(
            message="Invalid token",
            code="INVALID_TOKEN",
        )


class InvalidIdentityTokenException(UnauthorizedException):
    """The identity provider's ID token could not be verified"""

    def __init__(self):
        super().__init__(
            message="Sign-in failed: identity token could not be verified",
            code="INVALID_IDENTITY_TOKEN",
        )


class ConfigurationIncompleteException(ConflictException):
    """The user has no team or domain, so the ladder cannot be resolved."""

    def __init__(self):
        super().__init__(
            message=(
                "Your account is not fully configured. Please contact your "
                "administrator to assign you to a team and domain."
            ),
            code="CONFIGURATION_INCOMPLETE",
        )


# Resource specific exceptions
class UserNotFoundException(NotFoundException):
    """User not found"""

    def __init__(self):
        super().__init__(message="User not found", code="USER_NOT_FOUND")


class TeamNotFoundException(NotFoundException):
    """Team not found"""

    def __init__(self):
        super().__init__(message="Team not found", code="TEAM_NOT_FOUND")


class SkillNotFoundException(NotFoundException):
    """Skill not found"""

    def __init__(self):
        super().__init__(message="Skill not found", code="SKILL_NOT_FOUND")


class WaiverNotFoundException(NotFoundException):
    """Skill waiver not found"""

    def __init__(self):
        super().__init__(message="Skill waiver not found", code="WAIVER_NOT_FOUND")


class LadderConfigNotFoundException(NotFoundException):
    """Ladder configuration not found"""

    def __init__(self):
        super().__init__(
            message="Ladder configuration not found",
            code="LADDER_CONFIG_NOT_FOUND",
        )


class DomainAlreadyExistsException(ConflictException):
    """Domain slug already taken"""

    def __init__(self):
        super().__init__(
            message="A domain with this slug already exists",
            code="DOMAIN_EXISTS",
        )


class LadderConfigExistsException(ConflictException):
    """A ladder already exists for this team and domain"""

    def __init__(self):
        super().__init__(
            message="A ladder configuration already exists for this team and domain",
            code="LADDER_CONFIG_EXISTS",
        )
