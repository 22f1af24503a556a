"""Integration fixtures: the full FastAPI app behind an httpx client."""

from typing import Any, AsyncIterator, cast

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from macroplan import app as app_module


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client for GraphQL and REST tests.

    ASGITransport does not run the lifespan, so it is entered here to
    seed configuration and catalog. Recorded results are cleared after
    each test.
    """
    async with app_module.lifespan(app_module.app):
        transport = ASGITransport(app=cast(Any, app_module.app))
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac
    app_module._result_recorder.clear()  # type: ignore[attr-defined]
