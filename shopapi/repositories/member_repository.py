from typing import Optional
from sqlalchemy import update
from sqlalchemy.orm import Session

from shopapi.models.member import AdminMember as AdminMemberModel
from shopapi.models.member import Member as MemberModel, MemberRole
from shopapi.schemas.member import (
    AdminMember as AdminMemberSchema,
    Member as MemberSchema,
    MemberInfo,
)
from shopapi.repositories.base import BaseRepository


class MemberRepository(BaseRepository[MemberModel, MemberSchema]):
    """회원 리포지토리"""

    def __init__(self, db: Session):
        super().__init__(MemberModel, MemberSchema, db)

    def get_by_email(self, email: str) -> Optional[MemberSchema]:
        return self.get_by_fields(email=email)

    def get_by_name_and_phone(self, name: str, phone: str) -> Optional[MemberSchema]:
        return self.get_by_fields(name=name, phone=phone)

    def get_by_email_and_name_and_phone(
        self, email: str, name: str, phone: str
    ) -> Optional[MemberSchema]:
        return self.get_by_fields(email=email, name=name, phone=phone)

    def get_info(self, member_id: int) -> Optional[MemberInfo]:
        """비밀번호를 제외한 회원 정보 projection"""
        self._ensure_clean_session()
        model_instance = self._get_model(member_id)
        if model_instance is None:
            return None
        return MemberInfo.model_validate(model_instance)

    def email_exists(self, email: str) -> bool:
        """이메일 중복 체크"""
        return self.exists(filters={"email": email})

    def phone_exists(self, phone: str) -> bool:
        """전화번호 중복 체크"""
        return self.exists(filters={"phone": phone})

    def exists_by_id(self, member_id: int) -> bool:
        return self.exists(filters={"id": member_id})

    def create_member(
        self,
        email: str,
        password_hash: str,
        name: str,
        phone: str,
        birth: Optional[str] = None,
        role: MemberRole = MemberRole.BRONZE,
        commit: bool = True,
    ) -> MemberSchema:
        """신규 회원 생성 - point, chance는 0으로 시작"""
        return self.create(
            commit=commit,
            email=email,
            password=password_hash,
            name=name,
            phone=phone,
            birth=birth,
            role=role.value,
            point=0,
            chance=0,
        )

    def update_password(
        self, member_id: int, password_hash: str, commit: bool = True
    ) -> Optional[MemberSchema]:
        return self.update(member_id, commit=commit, password=password_hash)

    def update_address(
        self, member_id: int, address: str, commit: bool = True
    ) -> Optional[MemberSchema]:
        return self.update(member_id, commit=commit, address=address)

    def change_point(
        self, member_id: int, delta: int, commit: bool = True
    ) -> Optional[int]:
        """포인트를 delta만큼 원자적으로 증감하고 변경된 잔액을 반환.

        잔액이 음수가 되거나 회원이 없으면 아무것도 바꾸지 않고 None을 반환한다.
        """
        self._ensure_clean_session()
        result = self.db.execute(
            update(MemberModel)
            .where(MemberModel.id == member_id)
            .where(MemberModel.point + delta >= 0)
            .values(point=MemberModel.point + delta)
        )
        if result.rowcount == 0:
            return None
        self._finish(commit)

        return (
            self.db.query(MemberModel.point)
            .filter(MemberModel.id == member_id)
            .scalar()
        )


class AdminMemberRepository(BaseRepository[AdminMemberModel, AdminMemberSchema]):
    """관리자 회원 리포지토리"""

    def __init__(self, db: Session):
        super().__init__(AdminMemberModel, AdminMemberSchema, db)

    def get_by_member_id(self, member_id: int) -> Optional[AdminMemberSchema]:
        return self.get_by_fields(member_id=member_id)

    def create_admin(self, member_id: int, commit: bool = True) -> AdminMemberSchema:
        return self.create(commit=commit, member_id=member_id)
