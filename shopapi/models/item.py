from typing import Optional

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from shopapi.models.base import BaseModel, IdType


class Item(BaseModel):
    """판매 상품. 카탈로그 관리는 이 서비스의 범위 밖이며 찜 카운터만 갱신한다."""

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    sale: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    thumbnail: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="Stored file name of the thumbnail image"
    )
    preference_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def __repr__(self):
        return f"<Item(id={self.id}, name={self.name}, preference_count={self.preference_count})>"
