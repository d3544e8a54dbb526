from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from shopapi.models.member import MemberRole
from shopapi.schemas.common import CamelModel

PHONE_PATTERN = r"^01[0-9]{8,9}$"  # 01012345678


class Member(BaseModel):
    """Repository 레이어 변환용 - 비밀번호 해시 포함, 외부 응답에 사용 금지"""

    id: int
    role: MemberRole = MemberRole.BRONZE
    email: str
    password: str
    name: str
    phone: str
    birth: Optional[str] = None
    address: Optional[str] = None
    point: int = 0
    chance: int = 0
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class MemberInfo(CamelModel):
    """회원 정보 조회용 읽기 전용 projection (비밀번호 제외)"""

    role: MemberRole
    email: str
    name: str
    phone: str
    birth: Optional[str] = None
    address: Optional[str] = None
    point: int
    chance: int


class AdminMember(BaseModel):
    id: int
    member_id: int

    class Config:
        from_attributes = True


# ============================================================================
# Request / Response
# ============================================================================


class SignupRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=64)
    name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., pattern=PHONE_PATTERN)
    birth: Optional[str] = Field(None, max_length=20)
    role: MemberRole = MemberRole.BRONZE

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if v.strip() == "":
            raise ValueError("Name cannot be empty")
        return v.strip()


class SignupResponse(CamelModel):
    role: MemberRole
    member_id: int


class DuplicateEmailRequest(CamelModel):
    email: EmailStr


class DuplicatePhoneRequest(CamelModel):
    phone: str = Field(..., pattern=PHONE_PATTERN)


class DuplicateResponse(CamelModel):
    is_duplicate: bool


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class LoginResponse(CamelModel):
    token: str
    member_info: MemberInfo


class FindEmailRequest(CamelModel):
    name: str
    phone: str


class FindEmailResponse(CamelModel):
    email: str


class FindPasswordRequest(CamelModel):
    email: EmailStr
    name: str
    phone: str


class FindPasswordResponse(CamelModel):
    temp_password: str


class ChangePasswordRequest(CamelModel):
    new_password: str = Field(..., min_length=8, max_length=64)


class ChangeAddressRequest(CamelModel):
    address: str = Field(..., min_length=1, max_length=255)


class PointResponse(CamelModel):
    point: int


class MemberInfoResponse(CamelModel):
    member_info: MemberInfo


class LoginCheckResponse(CamelModel):
    is_login: bool
