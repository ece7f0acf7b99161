"""
Domain enums for Chef en Place.
Contains all enumeration types used across the domain models.
"""

import enum


class UserRole(str, enum.Enum):
    """Roles a user can hold inside a restaurant tenant"""

    HEAD_CHEF = "head-chef"
    USER = "user"
    TEAM_MEMBER = "team-member"


class UserStatus(str, enum.Enum):
    """Account approval lifecycle"""

    PENDING = "pending"
    APPROVED = "approved"
    ACTIVE = "active"
    INACTIVE = "inactive"


class PlanType(str, enum.Enum):
    """Subscription plans"""

    TRIAL = "trial"
    PRO = "pro"
    ENTERPRISE = "enterprise"


class BillingCycle(str, enum.Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


class SubscriptionStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    CANCELLED = "cancelled"
    PAST_DUE = "past_due"


class ConnectionState(str, enum.Enum):
    """Database connection states, indexed by ready-state number"""

    DISCONNECTED = "disconnected"
    CONNECTED = "connected"
    CONNECTING = "connecting"
    DISCONNECTING = "disconnecting"

    @property
    def ready_state(self) -> int:
        return list(ConnectionState).index(self)


class AuthErrorCode(str, enum.Enum):
    """Machine-readable codes returned by authentication endpoints"""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    USER_NOT_APPROVED = "USER_NOT_APPROVED"
    USER_INACTIVE = "USER_INACTIVE"
    USER_REJECTED = "USER_REJECTED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"
    REFRESH_TOKEN_REQUIRED = "REFRESH_TOKEN_REQUIRED"
    INVALID_REFRESH_TOKEN = "INVALID_REFRESH_TOKEN"
    INVALID_INVITE = "INVALID_INVITE"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    TEAM_RATE_LIMIT_EXCEEDED = "TEAM_RATE_LIMIT_EXCEEDED"
    SYSTEM_ERROR = "SYSTEM_ERROR"
    ORGANIZATION_NOT_FOUND = "ORGANIZATION_NOT_FOUND"
    NO_TEAM_MEMBERS = "NO_TEAM_MEMBERS"
    DUPLICATE_NAMES = "DUPLICATE_NAMES"
    WRONG_ORGANIZATION = "WRONG_ORGANIZATION"


class SignupErrorCode(str, enum.Enum):
    """Codes returned by registration and checkout endpoints"""

    EMAIL_EXISTS = "EMAIL_EXISTS"
    CREATION_ERROR = "CREATION_ERROR"
    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_EMAIL = "INVALID_EMAIL"
    WEAK_PASSWORD = "WEAK_PASSWORD"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class HttpStatus(enum.IntEnum):
    OK = 200
    CREATED = 201
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503
