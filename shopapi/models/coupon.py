from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from shopapi.models.base import BaseModel, IdType


class Coupon(BaseModel):
    __tablename__ = "coupons"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    discount_rate: Mapped[int] = mapped_column(Integer, nullable=False)  # percent
    is_used: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    expired_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
