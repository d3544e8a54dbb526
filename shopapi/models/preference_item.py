"""
Preference Item Model

Wish-list entry linking exactly one member to one item.
"""

from sqlalchemy import ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from shopapi.models.base import BaseModel, IdType


class PreferenceItem(BaseModel):
    __tablename__ = "preference_items"
    __table_args__ = (Index("idx_preference_items_member", "member_id"),)

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
        comment="Owning member",
    )
    item_id: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("items.id", ondelete="CASCADE"),
        nullable=False,
        comment="Wish-listed item",
    )
