"""
회원 API 라우터

- POST /member/signup: 회원가입 (201)
- POST /member/duplication/email: 이메일 중복 확인
- POST /member/duplication/phone: 전화번호 중복 확인
- POST /member/login: 로그인 (JWT 발급)
- POST /member/find/email: 이름 + 전화번호로 이메일 찾기
- POST /member/find/password: 임시 비밀번호 발급
- POST /member/change/password: 비밀번호 변경 (인증 필요)
- POST /member/change/address: 주소 변경 (인증 필요)
- GET /member/point: 내 포인트 (인증 필요)
- GET /member/info: 내 정보 (인증 필요)
- GET /member/isLogin: 로그인 여부

에러는 서비스에서 타입 있는 예외로 올라오고 전역 exception handler가 상태 코드로 변환한다.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Response, status
import logging

from shopapi.core.auth_middleware import (
    get_current_member_id,
    get_current_member_id_optional,
)
from shopapi.deps import get_login_service, get_member_service, get_signup_service
from shopapi.schemas.member import (
    ChangeAddressRequest,
    ChangePasswordRequest,
    DuplicateEmailRequest,
    DuplicatePhoneRequest,
    DuplicateResponse,
    FindEmailRequest,
    FindEmailResponse,
    FindPasswordRequest,
    FindPasswordResponse,
    LoginCheckResponse,
    LoginRequest,
    LoginResponse,
    MemberInfoResponse,
    PointResponse,
    SignupRequest,
    SignupResponse,
)
from shopapi.services.login_service import MemberLoginService
from shopapi.services.member_service import MemberService
from shopapi.services.signup_service import MemberSignupService

router = APIRouter(prefix="/member", tags=["member"])
logger = logging.getLogger(__name__)


@router.post(
    "/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED
)
def member_signup(
    request: SignupRequest,
    signup_service: MemberSignupService = Depends(get_signup_service),
) -> SignupResponse:
    member_id = signup_service.signup(request)
    return SignupResponse(role=request.role, member_id=member_id)


@router.post("/duplication/email", response_model=DuplicateResponse)
def check_duplication_email(
    request: DuplicateEmailRequest,
    member_service: MemberService = Depends(get_member_service),
) -> DuplicateResponse:
    return DuplicateResponse(
        is_duplicate=member_service.is_duplicate_email(request.email)
    )


@router.post("/duplication/phone", response_model=DuplicateResponse)
def check_duplication_phone(
    request: DuplicatePhoneRequest,
    member_service: MemberService = Depends(get_member_service),
) -> DuplicateResponse:
    return DuplicateResponse(
        is_duplicate=member_service.is_duplicate_phone(request.phone)
    )


@router.post("/login", response_model=LoginResponse)
def login(
    form: LoginRequest,
    login_service: MemberLoginService = Depends(get_login_service),
) -> LoginResponse:
    return login_service.login(form.email, form.password)


@router.post("/find/email", response_model=FindEmailResponse)
def find_email(
    form: FindEmailRequest,
    member_service: MemberService = Depends(get_member_service),
) -> FindEmailResponse:
    return FindEmailResponse(email=member_service.find_email(form.name, form.phone))


@router.post("/find/password", response_model=FindPasswordResponse)
def find_password(
    form: FindPasswordRequest,
    member_service: MemberService = Depends(get_member_service),
) -> FindPasswordResponse:
    temp_password = member_service.find_password(form.email, form.name, form.phone)
    return FindPasswordResponse(temp_password=temp_password)


@router.post("/change/password", status_code=status.HTTP_200_OK)
def change_password(
    form: ChangePasswordRequest,
    member_id: int = Depends(get_current_member_id),
    member_service: MemberService = Depends(get_member_service),
) -> Response:
    member_service.change_password(member_id, form.new_password)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/change/address", status_code=status.HTTP_200_OK)
def change_address(
    form: ChangeAddressRequest,
    member_id: int = Depends(get_current_member_id),
    member_service: MemberService = Depends(get_member_service),
) -> Response:
    member_service.change_address(member_id, form.address)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/point", response_model=PointResponse)
def find_point(
    member_id: int = Depends(get_current_member_id),
    member_service: MemberService = Depends(get_member_service),
) -> PointResponse:
    return PointResponse(point=member_service.find_point_by_member_id(member_id))


@router.get("/info", response_model=MemberInfoResponse)
def find_login_member_info(
    member_id: int = Depends(get_current_member_id),
    member_service: MemberService = Depends(get_member_service),
) -> MemberInfoResponse:
    return MemberInfoResponse(
        member_info=member_service.find_info_by_user_id(member_id)
    )


@router.get("/isLogin", response_model=LoginCheckResponse)
def is_login(
    member_id: Optional[int] = Depends(get_current_member_id_optional),
    member_service: MemberService = Depends(get_member_service),
) -> LoginCheckResponse:
    is_login = False
    if member_id is not None:
        is_login = member_service.exists_member_by_id(member_id)
    return LoginCheckResponse(is_login=is_login)
