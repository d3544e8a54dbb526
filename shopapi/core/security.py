from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import jwt, JWTError
from pydantic import BaseModel, ValidationError

from shopapi.config import settings

# bcrypt only looks at the first 72 bytes of the secret
_BCRYPT_MAX_BYTES = 72


def _truncate_to_72_bytes(password: str) -> bytes:
    """비밀번호를 UTF-8 바이트로 변환하고 72바이트로 제한."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > _BCRYPT_MAX_BYTES:
        password_bytes = password_bytes[:_BCRYPT_MAX_BYTES]
        # UTF-8 문자 경계 유지
        while password_bytes and (password_bytes[-1] & 0xC0) == 0x80:
            password_bytes = password_bytes[:-1]
    return password_bytes


def hash_password(password: str) -> str:
    hashed = bcrypt.hashpw(_truncate_to_72_bytes(password), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain: str, hashed: Optional[str]) -> bool:
    """bcrypt.checkpw는 상수 시간 비교를 사용한다."""
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_truncate_to_72_bytes(plain), hashed.encode("utf-8"))
    except ValueError:
        # malformed hash
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


class TokenPayload(BaseModel):
    member_id: int
    sub: str  # subject, the member's email


def decode_access_token(token: str) -> Optional[TokenPayload]:
    """JWT 토큰을 검증하고 payload를 반환합니다. 유효하지 않으면 None."""
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        return TokenPayload.model_validate(payload)
    except (JWTError, ValidationError):
        return None
