"""Health check router"""

from fastapi import APIRouter, Depends
from typing import Dict, Any

from ..services.plugin import IdentityManagementPlugin
from .dependencies import get_plugin

router = APIRouter()


@router.get("/health")
async def health_check(plugin: IdentityManagementPlugin = Depends(get_plugin)) -> Dict[str, Any]:
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "scim-idm-plugin",
        "version": "1.0.0",
        "configured": plugin.configured
    }


@router.get("/")
async def root() -> Dict[str, str]:
    """Root endpoint"""
    return {"message": "SCIM identity management plugin is running"}
