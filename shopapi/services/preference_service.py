from typing import List
from sqlalchemy.orm import Session
import logging

from shopapi.repositories.item_repository import ItemRepository
from shopapi.repositories.member_repository import MemberRepository
from shopapi.repositories.preference_repository import PreferenceRepository
from shopapi.schemas.preference import PreferenceSummary
from shopapi.core.exceptions import (
    ItemNotFoundError,
    MemberNotFoundError,
    PreferenceForbiddenError,
    PreferenceNotFoundError,
)

logger = logging.getLogger(__name__)


class PreferenceService:
    """찜 목록 서비스. 상품의 preference_count는 찜 레코드와 같은 트랜잭션에서 증감한다."""

    def __init__(self, db: Session):
        self.db = db
        self.preference_repo = PreferenceRepository(db)
        self.member_repo = MemberRepository(db)
        self.item_repo = ItemRepository(db)

    def save_preference_item(self, member_id: int, item_id: int) -> int:
        """상품을 찜하고 생성된 찜 id를 반환"""
        if not self.member_repo.exists_by_id(member_id):
            raise MemberNotFoundError(member_id)
        if not self.item_repo.exists_by_id(item_id):
            raise ItemNotFoundError(item_id)

        try:
            preference = self.preference_repo.create_preference(
                member_id=member_id, item_id=item_id, commit=False
            )
            self.item_repo.adjust_preference_count(item_id, 1, commit=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Member {member_id} added item {item_id} (preference {preference.id})")
        return preference.id

    def find_preference_by_member_id(self, member_id: int) -> List[PreferenceSummary]:
        """찜한 순서대로 반환"""
        if not self.member_repo.exists_by_id(member_id):
            raise MemberNotFoundError(member_id)
        return self.preference_repo.get_member_preferences(member_id)

    def delete_preference(self, member_id: int, preference_id: int) -> None:
        """본인 찜만 삭제 가능. 다른 회원의 찜이면 PreferenceForbiddenError"""
        preference = self.preference_repo.get_by_id(preference_id)
        if not preference:
            raise PreferenceNotFoundError(preference_id)

        if preference.member_id != member_id:
            logger.warning(
                f"Member {member_id} tried to delete preference {preference_id} "
                f"owned by member {preference.member_id}"
            )
            raise PreferenceForbiddenError(preference_id)

        try:
            self.item_repo.adjust_preference_count(preference.item_id, -1, commit=False)
            self.preference_repo.delete(preference_id, commit=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Member {member_id} removed preference {preference_id}")
