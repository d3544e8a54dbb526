import logging

from sqlalchemy.orm import Session

from shopapi.core.exceptions import InvalidCredentialsError
from shopapi.core.security import create_access_token, verify_password
from shopapi.repositories.member_repository import MemberRepository
from shopapi.schemas.member import LoginResponse, MemberInfo

logger = logging.getLogger(__name__)


class MemberLoginService:
    """이메일/비밀번호 로그인과 JWT 발급"""

    def __init__(self, db: Session):
        self.db = db
        self.member_repo = MemberRepository(db)

    def login(self, email: str, password: str) -> LoginResponse:
        member = self.member_repo.get_by_email(email)
        # 없는 이메일과 틀린 비밀번호를 구분하지 않는다
        if not member or not verify_password(password, member.password):
            logger.warning(f"Login failed for {email}")
            raise InvalidCredentialsError()

        token = create_access_token(data={"sub": member.email, "member_id": member.id})

        return LoginResponse(
            token=token,
            member_info=MemberInfo.model_validate(member.model_dump()),
        )
