# Repository layer - Data access with Pydantic responses

from .base import BaseRepository
from .member_repository import AdminMemberRepository, MemberRepository
from .item_repository import ItemRepository
from .preference_repository import PreferenceRepository
