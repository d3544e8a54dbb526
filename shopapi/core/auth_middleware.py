from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shopapi.core.exceptions import AuthenticationError
from shopapi.core.security import decode_access_token

# JWT Bearer 토큰 스킴
security = HTTPBearer(auto_error=False)

_BEARER_HEADERS = {"WWW-Authenticate": "Bearer"}


def get_current_member_id_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[int]:
    """선택적 인증 - 토큰이 없거나 유효하지 않으면 None 반환"""
    if not credentials:
        return None

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        return None
    return payload.member_id


def get_current_member_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> int:
    """필수 인증 - 유효한 토큰의 member_id를 반환"""
    if not credentials:
        error = AuthenticationError("Authentication required")
        error.headers = _BEARER_HEADERS
        raise error

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        error = AuthenticationError("Invalid or expired token")
        error.headers = _BEARER_HEADERS
        raise error
    return payload.member_id
