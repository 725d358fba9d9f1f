"""
Pytest configuration and fixtures for the Lenco SDK tests.

HTTP traffic is mocked with pytest-httpx's ``httpx_mock`` fixture.
"""
from __future__ import annotations

import pytest

from lenco_helpers import BASE_URL, StatusRecorder
from lenco_momo import AsyncLencoClient, LencoSettings


@pytest.fixture
def api_key() -> str:
    """Test API key."""
    return "test-api-key"


@pytest.fixture
def settings() -> LencoSettings:
    """Settings isolated from the environment."""
    return LencoSettings(base_url=BASE_URL, timeout=5.0, _env_file=None)


@pytest.fixture
async def client(api_key: str, settings: LencoSettings) -> AsyncLencoClient:
    """Create a test client."""
    client = AsyncLencoClient(api_key=api_key, settings=settings)
    yield client
    await client.close()


@pytest.fixture
def recorder() -> StatusRecorder:
    return StatusRecorder()
