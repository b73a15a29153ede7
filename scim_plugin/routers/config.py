"""Configuration router"""

from fastapi import APIRouter, Depends

from ..models.plugin import ConfigureRequest, ConfigureResponse
from ..services.plugin import IdentityManagementPlugin
from .dependencies import get_plugin

router = APIRouter(tags=["config"])


@router.post("/config", response_model=ConfigureResponse)
async def configure(
    request: ConfigureRequest,
    plugin: IdentityManagementPlugin = Depends(get_plugin)
) -> ConfigureResponse:
    """Applies a YAML plugin configuration"""
    await plugin.configure(request.yaml_configuration)
    return ConfigureResponse()
