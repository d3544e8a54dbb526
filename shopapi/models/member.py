from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Union

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shopapi.models.base import BaseModel, IdType

if TYPE_CHECKING:
    from shopapi.models.cart_item import CartItem
    from shopapi.models.coupon import Coupon
    from shopapi.models.order import Order
    from shopapi.models.preference_item import PreferenceItem
    from shopapi.models.qna import Qna
    from shopapi.models.review import Review


class MemberRole(str, Enum):
    """회원 등급"""

    BRONZE = "BRONZE"  # 기본 가입 등급
    SILVER = "SILVER"
    GOLD = "GOLD"
    ADMIN = "ADMIN"  # 판매자/관리자

    @classmethod
    def is_admin(cls, role: Union[str, "MemberRole"]) -> bool:
        if isinstance(role, cls):
            role = role.value
        return role == cls.ADMIN.value


# Owned rows are removed by the database (ON DELETE CASCADE) when the member goes
_OWNED = dict(cascade="all, delete-orphan", passive_deletes=True)


class Member(BaseModel):
    __tablename__ = "members"
    __table_args__ = (Index("idx_members_name_phone", "name", "phone"),)

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    role: Mapped[str] = mapped_column(
        String(20), default=MemberRole.BRONZE.value, nullable=False
    )
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    password: Mapped[str] = mapped_column(Text, nullable=False)  # bcrypt hash
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    birth: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    point: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    chance: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    cart_items: Mapped[List["CartItem"]] = relationship(**_OWNED)
    orders: Mapped[List["Order"]] = relationship(**_OWNED)
    preference_items: Mapped[List["PreferenceItem"]] = relationship(
        order_by="PreferenceItem.id", **_OWNED
    )
    coupons: Mapped[List["Coupon"]] = relationship(**_OWNED)
    qnas: Mapped[List["Qna"]] = relationship(**_OWNED)
    reviews: Mapped[List["Review"]] = relationship(**_OWNED)

    def __repr__(self):
        return f"<Member(id={self.id}, email={self.email}, role={self.role})>"


class AdminMember(BaseModel):
    """관리자(판매자) 권한이 부여된 회원"""

    __tablename__ = "admin_members"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("members.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
