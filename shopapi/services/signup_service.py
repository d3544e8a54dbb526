import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shopapi.core.exceptions import ConflictError, DuplicateEmailError, DuplicatePhoneError
from shopapi.core.security import hash_password
from shopapi.models.member import MemberRole
from shopapi.repositories.member_repository import (
    AdminMemberRepository,
    MemberRepository,
)
from shopapi.schemas.member import SignupRequest

logger = logging.getLogger(__name__)


class MemberSignupService:
    """회원가입"""

    def __init__(self, db: Session):
        self.db = db
        self.member_repo = MemberRepository(db)
        self.admin_repo = AdminMemberRepository(db)

    def signup(self, request: SignupRequest) -> int:
        """회원을 생성하고 발급된 id를 반환. ADMIN 가입이면 관리자 레코드도 함께 만든다."""
        if self.member_repo.email_exists(request.email):
            raise DuplicateEmailError(request.email)
        if self.member_repo.phone_exists(request.phone):
            raise DuplicatePhoneError(request.phone)

        try:
            member = self.member_repo.create_member(
                email=request.email,
                password_hash=hash_password(request.password),
                name=request.name,
                phone=request.phone,
                birth=request.birth,
                role=request.role,
                commit=False,
            )
            if MemberRole.is_admin(request.role):
                self.admin_repo.create_admin(member.id, commit=False)
            self.db.commit()
        except IntegrityError:
            # 동시 가입에 밀린 경우: 어느 unique 컬럼이 겹쳤는지 다시 확인
            self.db.rollback()
            if self.member_repo.email_exists(request.email):
                raise DuplicateEmailError(request.email)
            if self.member_repo.phone_exists(request.phone):
                raise DuplicatePhoneError(request.phone)
            raise ConflictError("Member already registered", error_code="MEMBER_002")
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"New member signed up: {member.id} ({request.role.value})")
        return member.id
