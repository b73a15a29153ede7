"""Services for the SCIM identity management plugin"""

from .filter_builder import build_filter
from .decoder import decode_response
from .client import SCIMClient
from .plugin import IdentityManagementPlugin

__all__ = [
    "build_filter",
    "decode_response",
    "SCIMClient",
    "IdentityManagementPlugin",
]
