
from typing import List
from sqlalchemy.orm import Session

from shopapi.models.item import Item
from shopapi.models.preference_item import PreferenceItem
from shopapi.schemas.preference import PreferenceSchema, PreferenceSummary
from shopapi.repositories.base import BaseRepository


class PreferenceRepository(BaseRepository[PreferenceItem, PreferenceSchema]):
    """찜 리포지토리"""

    def __init__(self, db: Session):
        super().__init__(
            model_class=PreferenceItem,
            schema_class=PreferenceSchema,
            db=db,
        )

    def create_preference(
        self, member_id: int, item_id: int, commit: bool = True
    ) -> PreferenceSchema:
        return self.create(commit=commit, member_id=member_id, item_id=item_id)

    def get_member_preferences(self, member_id: int) -> List[PreferenceSummary]:
        """상품 정보와 조인한 찜 목록 (찜한 순서)"""
        self._ensure_clean_session()

        rows = (
            self.db.query(
                PreferenceItem.id,
                Item.thumbnail,
                Item.name,
                Item.price,
                Item.sale,
            )
            .join(Item, PreferenceItem.item_id == Item.id)
            .filter(PreferenceItem.member_id == member_id)
            .order_by(PreferenceItem.id)
            .all()
        )

        return [
            PreferenceSummary(
                thumbnail=row.thumbnail,
                name=row.name,
                price=row.price,
                sale=row.sale,
                preference_id=row.id,
            )
            for row in rows
        ]
