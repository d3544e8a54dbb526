from enum import Enum

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from shopapi.models.base import BaseModel, IdType


class OrderStatus(str, Enum):
    ORDERED = "ORDERED"
    DELIVERING = "DELIVERING"
    COMPLETED = "COMPLETED"
    CANCELED = "CANCELED"


class Order(BaseModel):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(
        String(20), default=OrderStatus.ORDERED.value, nullable=False
    )
    total_price: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    used_point: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
