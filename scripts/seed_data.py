"""
개발용 상품 시드 스크립트
찜 기능을 시험할 수 있도록 기본 상품을 넣는다.
"""

import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shopapi.database.session import get_db_context
from shopapi.models import Item


DEFAULT_ITEMS = [
    # (name, price, sale, thumbnail)
    ("Basic Cotton T-Shirt", 19000, False, "tshirt.png"),
    ("Slim Denim Jeans", 49000, True, "jeans.png"),
    ("Wool Knit Sweater", 69000, False, "sweater.png"),
    ("Canvas Sneakers", 59000, True, "sneakers.png"),
    ("Leather Belt", 29000, False, "belt.png"),
]


def seed_items():
    with get_db_context() as db:
        existing = {name for (name,) in db.query(Item.name).all()}
        new_items = [
            Item(name=name, price=price, sale=sale, thumbnail=thumbnail)
            for name, price, sale, thumbnail in DEFAULT_ITEMS
            if name not in existing
        ]
        db.add_all(new_items)

    print(f"✅ 상품 시드 완료: {len(new_items)}개 추가")
    for item in new_items:
        print(f"   - {item.name} ({item.price}원)")


if __name__ == "__main__":
    seed_items()
