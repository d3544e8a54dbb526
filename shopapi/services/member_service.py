import logging
import secrets
import string

from sqlalchemy.orm import Session

from shopapi.config import Settings
from shopapi.core.exceptions import (
    AdminNotFoundError,
    InsufficientPointError,
    MemberNotFoundError,
    SamePasswordError,
)
from shopapi.core.security import hash_password, verify_password
from shopapi.repositories.member_repository import (
    AdminMemberRepository,
    MemberRepository,
)
from shopapi.schemas.member import AdminMember, Member, MemberInfo

logger = logging.getLogger(__name__)

# '_' is a word character, so it would not count as a symbol for \W
TEMP_PASSWORD_SYMBOLS = "!@#$%^&*()-+=?"
_TEMP_PASSWORD_CLASSES = (
    string.ascii_lowercase,
    string.ascii_uppercase,
    string.digits,
    TEMP_PASSWORD_SYMBOLS,
)


def generate_temp_password(length: int = 10) -> str:
    """소문자, 대문자, 숫자, 특수문자를 최소 1개씩 포함하는 공백 없는 임시 비밀번호"""
    if length < len(_TEMP_PASSWORD_CLASSES):
        raise ValueError(f"length must be at least {len(_TEMP_PASSWORD_CLASSES)}")

    rng = secrets.SystemRandom()
    chars = [rng.choice(pool) for pool in _TEMP_PASSWORD_CLASSES]
    alphabet = "".join(_TEMP_PASSWORD_CLASSES)
    chars += [rng.choice(alphabet) for _ in range(length - len(chars))]
    rng.shuffle(chars)
    return "".join(chars)


class MemberService:
    """회원 관련 비즈니스 로직을 담당하는 서비스"""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.member_repo = MemberRepository(db)
        self.admin_repo = AdminMemberRepository(db)
        self.settings = settings

    def _get_member(self, member_id: int) -> Member:
        member = self.member_repo.get_by_id(member_id)
        if not member:
            raise MemberNotFoundError(member_id)
        return member

    def is_duplicate_email(self, email: str) -> bool:
        return self.member_repo.email_exists(email)

    def is_duplicate_phone(self, phone: str) -> bool:
        return self.member_repo.phone_exists(phone)

    def exists_member_by_id(self, member_id: int) -> bool:
        return self.member_repo.exists_by_id(member_id)

    def find_email(self, name: str, phone: str) -> str:
        """이름 + 전화번호로 가입 이메일 찾기"""
        member = self.member_repo.get_by_name_and_phone(name, phone)
        if not member:
            raise MemberNotFoundError()
        return member.email

    def find_password(self, email: str, name: str, phone: str) -> str:
        """임시 비밀번호를 발급해 저장하고 평문을 반환.

        회원의 비밀번호는 즉시 임시 비밀번호로 바뀐다.
        """
        member = self.member_repo.get_by_email_and_name_and_phone(email, name, phone)
        if not member:
            raise MemberNotFoundError()

        temp_password = generate_temp_password(self.settings.TEMP_PASSWORD_LENGTH)
        self.member_repo.update_password(member.id, hash_password(temp_password))

        logger.info(f"Issued temporary password for member {member.id}")
        return temp_password

    def change_password(self, member_id: int, new_password: str) -> None:
        member = self._get_member(member_id)

        if verify_password(new_password, member.password):
            raise SamePasswordError()

        self.member_repo.update_password(member_id, hash_password(new_password))
        logger.info(f"Member {member_id} changed password")

    def change_address(self, member_id: int, address: str) -> None:
        self._get_member(member_id)
        self.member_repo.update_address(member_id, address)

    def change_point(self, member_id: int, delta: int) -> int:
        """포인트를 delta만큼 증감하고 변경 후 잔액을 반환"""
        member = self._get_member(member_id)

        new_point = self.member_repo.change_point(member_id, delta)
        if new_point is None:
            raise InsufficientPointError(current=member.point, delta=delta)

        logger.info(f"Member {member_id} point {delta:+d} -> {new_point}")
        return new_point

    def find_point_by_member_id(self, member_id: int) -> int:
        return self._get_member(member_id).point

    def find_info_by_user_id(self, member_id: int) -> MemberInfo:
        info = self.member_repo.get_info(member_id)
        if not info:
            raise MemberNotFoundError(member_id)
        return info

    def find_admin_by_member_id(self, member_id: int) -> AdminMember:
        member = self._get_member(member_id)

        admin = self.admin_repo.get_by_member_id(member.id)
        if not admin:
            raise AdminNotFoundError(member_id)
        return admin
