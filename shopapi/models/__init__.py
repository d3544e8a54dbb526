# Import every model so relationship() string targets resolve and
# Base.metadata knows all tables.
from shopapi.models.base import Base
from shopapi.models.member import AdminMember, Member, MemberRole
from shopapi.models.item import Item
from shopapi.models.preference_item import PreferenceItem
from shopapi.models.cart_item import CartItem
from shopapi.models.order import Order, OrderStatus
from shopapi.models.coupon import Coupon
from shopapi.models.qna import Qna
from shopapi.models.review import Review

__all__ = [
    "Base",
    "AdminMember",
    "Member",
    "MemberRole",
    "Item",
    "PreferenceItem",
    "CartItem",
    "Order",
    "OrderStatus",
    "Coupon",
    "Qna",
    "Review",
]
