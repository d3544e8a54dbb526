from fastapi import Depends
from sqlalchemy.orm import Session

from shopapi.database.session import get_db
from shopapi.config import settings

# Services
from shopapi.services.member_service import MemberService
from shopapi.services.signup_service import MemberSignupService
from shopapi.services.login_service import MemberLoginService
from shopapi.services.preference_service import PreferenceService


def get_member_service(db: Session = Depends(get_db)) -> MemberService:
    return MemberService(db=db, settings=settings)


def get_signup_service(db: Session = Depends(get_db)) -> MemberSignupService:
    return MemberSignupService(db=db)


def get_login_service(db: Session = Depends(get_db)) -> MemberLoginService:
    return MemberLoginService(db=db)


def get_preference_service(db: Session = Depends(get_db)) -> PreferenceService:
    return PreferenceService(db=db)
