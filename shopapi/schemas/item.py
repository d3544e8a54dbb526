from typing import Optional

from pydantic import BaseModel


class Item(BaseModel):
    id: int
    name: str
    price: int
    sale: bool = False
    thumbnail: Optional[str] = None
    preference_count: int = 0

    class Config:
        from_attributes = True
