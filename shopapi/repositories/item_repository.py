from sqlalchemy import update
from sqlalchemy.orm import Session

from shopapi.models.item import Item as ItemModel
from shopapi.schemas.item import Item as ItemSchema
from shopapi.repositories.base import BaseRepository


class ItemRepository(BaseRepository[ItemModel, ItemSchema]):
    """상품 리포지토리 - 찜 카운터 갱신 전용"""

    def __init__(self, db: Session):
        super().__init__(ItemModel, ItemSchema, db)

    def exists_by_id(self, item_id: int) -> bool:
        return self.exists(filters={"id": item_id})

    def adjust_preference_count(
        self, item_id: int, delta: int, commit: bool = True
    ) -> bool:
        """UPDATE items SET preference_count = preference_count + :delta

        읽기-수정-쓰기 대신 단일 UPDATE 문으로 처리해 동시 요청에서도 갱신이
        유실되지 않는다. 카운터는 0 아래로 내려가지 않는다.
        """
        self._ensure_clean_session()
        result = self.db.execute(
            update(ItemModel)
            .where(ItemModel.id == item_id)
            .where(ItemModel.preference_count + delta >= 0)
            .values(preference_count=ItemModel.preference_count + delta)
        )
        self._finish(commit)
        return result.rowcount > 0
