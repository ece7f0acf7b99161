"""
Standardized API response shaping.
Provides consistent user projections and success/error envelopes across endpoints.
"""

from typing import Any, Mapping, Optional, Tuple

from domain.enums import AuthErrorCode, SignupErrorCode, HttpStatus

AUTH_ERROR_CODES = AuthErrorCode
SIGNUP_ERROR_CODES = SignupErrorCode
HTTP_STATUS = HttpStatus

PUBLIC_USER_FIELDS = (
    "firstName",
    "lastName",
    "name",
    "email",
    "role",
    "status",
    "organization",
    "permissions",
    "avatar",
)


def standardize_user_object(user: Mapping[str, Any]) -> dict:
    """Project a stored user onto the fields clients may see"""
    user_id = user.get("_id")
    projection = {"id": str(user_id) if user_id is not None else None}
    for field in PUBLIC_USER_FIELDS:
        projection[field] = user.get(field)
    return projection


def auth_success_response(
    user: Mapping[str, Any], access_token: str, refresh_token: str
) -> dict:
    """Body returned after a successful login or registration"""
    return {
        "user": standardize_user_object(user),
        "accessToken": access_token,
        "refreshToken": refresh_token,
    }


def error_response(
    message: str, code: Optional[str] = None, status_code: int = HttpStatus.BAD_REQUEST
) -> Tuple[int, dict]:
    """Create a standardized error body paired with its status code"""
    response: dict = {"message": message}
    if code:
        response["code"] = getattr(code, "value", code)
    return int(status_code), response


def success_response(data: Any = None, message: Optional[str] = None) -> dict:
    """Create a standardized success body; empty values are left out"""
    response: dict = {}
    if data:
        response["data"] = data
    if message:
        response["message"] = message
    return response
