import os
import sys

import pytest
from unittest.mock import AsyncMock

# Add the project root directory to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from track_embed.models.credential import ApplicationIdentity, Credential
from track_embed.services.credential_store import CredentialStore

@pytest.fixture
def identity():
    return ApplicationIdentity("test_client_id", "test_client_secret")


@pytest.fixture
def credential_store():
    return CredentialStore()


@pytest.fixture
def valid_credential():
    return Credential(token="cached_token", expires_at=4_000_000_000.0)


@pytest.fixture
def expired_credential():
    return Credential(token="expired_token", expires_at=1.0)


@pytest.fixture
def mock_credential_manager(credential_store):
    manager = AsyncMock()

    async def acquire():
        credential = Credential(token="fresh_token", expires_at=4_000_000_000.0)
        credential_store.set(credential)
        return credential

    manager.acquire = AsyncMock(side_effect=acquire)
    return manager
