from fastapi import HTTPException, status
from typing import Optional, Dict, Any


class BaseAPIException(HTTPException):
    """Base exception for API errors"""
    def __init__(
        self,
        status_code: int,
        error_code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.error_code = error_code
        self.message = message
        self.details = details or {}

        super().__init__(
            status_code=status_code,
            detail={
                "success": False,
                "error": {
                    "code": error_code,
                    "message": message,
                    "details": self.details
                }
            }
        )

    def __str__(self) -> str:  # Ensure str(e) returns the human message
        return self.message


class AuthenticationError(BaseAPIException):
    """Authentication related errors"""
    def __init__(self, message: str = "Authentication failed", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error_code="AUTH_001",
            message=message,
            details=details
        )


class InvalidCredentialsError(BaseAPIException):
    """Wrong email or password on login"""
    def __init__(self, message: str = "Invalid email or password", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error_code="AUTH_004",
            message=message,
            details=details
        )


class AuthorizationError(BaseAPIException):
    """Authorization related errors"""
    def __init__(
        self,
        message: str = "Access forbidden",
        details: Optional[Dict] = None,
        error_code: str = "AUTH_002",
    ):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            error_code=error_code,
            message=message,
            details=details
        )


class ValidationError(BaseAPIException):
    """Validation errors"""
    def __init__(self, message: str = "Validation failed", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            error_code="VALIDATION_001",
            message=message,
            details=details
        )


class BusinessLogicError(BaseAPIException):
    """Business logic errors"""
    def __init__(self, error_code: str, message: str, details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code=error_code,
            message=message,
            details=details
        )


class NotFoundError(BaseAPIException):
    """Resource not found errors"""
    def __init__(
        self,
        message: str = "Resource not found",
        details: Optional[Dict] = None,
        error_code: str = "NOT_FOUND_001",
    ):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=error_code,
            message=message,
            details=details
        )


class ConflictError(BaseAPIException):
    """Resource conflict errors"""
    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[Dict] = None,
        error_code: str = "CONFLICT_001",
    ):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            error_code=error_code,
            message=message,
            details=details
        )


class InternalServerError(BaseAPIException):
    """Internal server errors"""
    def __init__(self, message: str = "Internal server error", details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code="INTERNAL_001",
            message=message,
            details=details
        )


# ============================================================================
# Domain errors
# ============================================================================


class MemberNotFoundError(NotFoundError):
    def __init__(self, member_id: Optional[int] = None):
        details = {"member_id": member_id} if member_id is not None else None
        super().__init__("Member not found", details=details, error_code="MEMBER_001")


class DuplicateEmailError(ConflictError):
    def __init__(self, email: str):
        super().__init__(
            f"Email already registered: {email}",
            details={"email": email},
            error_code="MEMBER_002",
        )


class DuplicatePhoneError(ConflictError):
    def __init__(self, phone: str):
        super().__init__(
            f"Phone already registered: {phone}",
            details={"phone": phone},
            error_code="MEMBER_003",
        )


class SamePasswordError(BusinessLogicError):
    def __init__(self):
        super().__init__("MEMBER_004", "New password must differ from the current one")


class InsufficientPointError(BusinessLogicError):
    def __init__(self, current: int, delta: int):
        super().__init__(
            "MEMBER_005",
            "Insufficient point balance",
            details={"current_point": current, "delta": delta},
        )


class AdminNotFoundError(NotFoundError):
    def __init__(self, member_id: int):
        super().__init__(
            "Member is not an admin",
            details={"member_id": member_id},
            error_code="ADMIN_001",
        )


class ItemNotFoundError(NotFoundError):
    def __init__(self, item_id: int):
        super().__init__(
            "Item not found", details={"item_id": item_id}, error_code="ITEM_001"
        )


class PreferenceNotFoundError(NotFoundError):
    def __init__(self, preference_id: int):
        super().__init__(
            "Preference not found",
            details={"preference_id": preference_id},
            error_code="PREFERENCE_001",
        )


class PreferenceForbiddenError(AuthorizationError):
    def __init__(self, preference_id: int):
        super().__init__(
            "No authority to edit this preference",
            details={"preference_id": preference_id},
            error_code="PREFERENCE_002",
        )
