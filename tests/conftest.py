"""Shared fixtures"""

import pytest

from scim_plugin.models.plugin import ConnectionParams
from tests.mock_scim_backend import MOCK_HOST, MockSCIMBackend


@pytest.fixture
def backend():
    return MockSCIMBackend()


@pytest.fixture
def connection_params():
    return ConnectionParams(host=MOCK_HOST, client_id="test-client", client_secret="unreal")
