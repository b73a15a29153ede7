"""Users router: groups of a user"""

from fastapi import APIRouter, Depends, Query
from typing import Optional
import logging

from ..models.plugin import GetGroupsForUserResponse
from ..services.plugin import IdentityManagementPlugin
from .dependencies import get_plugin

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


@router.get("/{user_id}/groups", response_model=GetGroupsForUserResponse)
async def get_groups_for_user(
    user_id: str,
    deadline: Optional[float] = Query(None, gt=0, description="Upstream deadline in seconds"),
    plugin: IdentityManagementPlugin = Depends(get_plugin)
) -> GetGroupsForUserResponse:
    """Returns the groups of a user"""
    logger.info(f"Processing groups-for-user request: {user_id}")
    response = await plugin.get_groups_for_user(user_id, deadline=deadline)
    logger.info(f"Returning {len(response.groups)} groups for user {user_id}")
    return response
