from .member import Member, MemberInfo, AdminMember
from .item import Item
from .preference import PreferenceSchema, PreferenceSummary
from .health import HealthCheckResponse
