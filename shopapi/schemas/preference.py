"""
Preference Schemas

Pydantic models for wish-list (preference) requests and responses.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from shopapi.schemas.common import CamelModel


class PreferenceSchema(BaseModel):
    """
    Basic preference schema matching database model.
    Used for repository layer conversions.
    """
    id: int
    member_id: int
    item_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PreferenceSummary(CamelModel):
    """Wish-listed item as shown in the member's list"""
    thumbnail: Optional[str] = Field(None, description="Thumbnail file name")
    name: str
    price: int
    sale: bool
    preference_id: int


class AddPreferenceRequest(CamelModel):
    item_id: int = Field(..., ge=1)


class AddPreferenceResponse(CamelModel):
    preference_id: int


class PreferenceListResponse(CamelModel):
    preferences: List[PreferenceSummary]
