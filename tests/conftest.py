"""Pytest fixtures and configuration"""

from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from trip_ledger.main import app
from trip_ledger.models.split import SplitParticipant, SplitRequest


@pytest.fixture
def make_request() -> Callable[..., SplitRequest]:
    """Factory for a SplitRequest with participants p1..pn holding the given share values"""

    def _make(total_amount, split_type, share_values) -> SplitRequest:
        return SplitRequest(
            total_amount=total_amount,
            split_type=split_type,
            participants=[
                SplitParticipant(participant_id=f"p{i + 1}", share_value=value)
                for i, value in enumerate(share_values)
            ],
        )

    return _make


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create test client bound to the ASGI app"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
