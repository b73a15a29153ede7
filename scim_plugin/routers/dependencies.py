"""Shared router dependencies"""

from fastapi import Request

from ..services.plugin import IdentityManagementPlugin


def get_plugin(request: Request) -> IdentityManagementPlugin:
    """Returns the plugin instance of the running application"""
    return request.app.state.plugin
