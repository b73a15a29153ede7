"""Groups router: users of a group"""

from fastapi import APIRouter, Depends, Query
from typing import Optional
import logging

from ..models.plugin import GetUsersForGroupResponse
from ..services.plugin import IdentityManagementPlugin
from .dependencies import get_plugin

router = APIRouter(prefix="/groups", tags=["groups"])
logger = logging.getLogger(__name__)


@router.get("/{group_id}/users", response_model=GetUsersForGroupResponse)
async def get_users_for_group(
    group_id: str,
    deadline: Optional[float] = Query(None, gt=0, description="Upstream deadline in seconds"),
    plugin: IdentityManagementPlugin = Depends(get_plugin)
) -> GetUsersForGroupResponse:
    """Returns the users of a group"""
    logger.info(f"Processing users-for-group request: {group_id}")
    response = await plugin.get_users_for_group(group_id, deadline=deadline)
    logger.info(f"Returning {len(response.users)} users for group {group_id}")
    return response
