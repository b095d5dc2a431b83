"""Test fixtures for dma-maturity-assessment."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dma_maturity_assessment.core.scoring import MaturityScorer
from dma_maturity_assessment.main import app


@pytest.fixture()
def scorer() -> MaturityScorer:
    """Scorer with the default tier table."""
    return MaturityScorer()


@pytest_asyncio.fixture()
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async test client against the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
