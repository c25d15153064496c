"""pytest shared configuration."""

import pytest


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio."""
    return "asyncio"
