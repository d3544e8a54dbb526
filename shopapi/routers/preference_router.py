"""
Preference Router

API endpoints for the member's wish-list.
"""

from fastapi import APIRouter, Depends, Response, status
import logging

from shopapi.core.auth_middleware import get_current_member_id
from shopapi.deps import get_preference_service
from shopapi.schemas.preference import (
    AddPreferenceRequest,
    AddPreferenceResponse,
    PreferenceListResponse,
)
from shopapi.services.preference_service import PreferenceService

router = APIRouter(prefix="/preference", tags=["preference"])
logger = logging.getLogger(__name__)


@router.post(
    "", response_model=AddPreferenceResponse, status_code=status.HTTP_201_CREATED
)
def add_preference(
    request: AddPreferenceRequest,
    member_id: int = Depends(get_current_member_id),
    preference_service: PreferenceService = Depends(get_preference_service),
) -> AddPreferenceResponse:
    """Add an item to the current member's wish-list."""
    preference_id = preference_service.save_preference_item(member_id, request.item_id)
    return AddPreferenceResponse(preference_id=preference_id)


@router.get("", response_model=PreferenceListResponse)
def get_my_preferences(
    member_id: int = Depends(get_current_member_id),
    preference_service: PreferenceService = Depends(get_preference_service),
) -> PreferenceListResponse:
    """Current member's wish-list, oldest first."""
    return PreferenceListResponse(
        preferences=preference_service.find_preference_by_member_id(member_id)
    )


@router.delete("/{preference_id}", status_code=status.HTTP_200_OK)
def delete_preference(
    preference_id: int,
    member_id: int = Depends(get_current_member_id),
    preference_service: PreferenceService = Depends(get_preference_service),
) -> Response:
    """Remove a wish-list entry. Only its owner may remove it."""
    preference_service.delete_preference(member_id, preference_id)
    return Response(status_code=status.HTTP_200_OK)
