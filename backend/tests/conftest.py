"""Pytest fixtures for CityWatch backend tests."""

from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from citywatch.dependencies import get_store
from citywatch.main import app
from citywatch.models import Incident, IncidentStatus
from citywatch.services import AccessControl, IncidentStore


@pytest.fixture
def sample_rows() -> list[dict[str, Any]]:
    """Raw rows as produced by csv.DictReader."""
    return [
        {
            "text": "Fire reported in apartment",
            "category": "Fire",
            "type": "Residential Fire",
            "location": "Koramangala",
            "time": "2024-03-15 08:30:00",
            "status": "New",
        },
        {
            "text": "Chain snatching near bus stop",
            "category": "Crime",
            "type": "Theft",
            "location": "MG Road",
            "time": "2024-03-15 09:10:00",
            "status": "New",
        },
        {
            "text": "Man collapsed at metro station",
            "category": "Medical",
            "type": "Cardiac",
            "location": "Indiranagar",
            "time": "2024-03-15 09:45:00",
            "status": "Acknowledged",
        },
        {
            "text": "Bike skidded on wet road",
            "category": "Accident",
            "type": "Road Accident",
            "location": "Hebbal",
            "time": "2024-03-15 10:05:00",
            "status": "New",
        },
        {
            "text": "Signal failure at junction",
            "category": "Traffic",
            "type": "Signal Failure",
            "location": "Silk Board",
            "time": "2024-03-16 10:20:00",
            "status": "Resolved",
        },
        {
            "text": "Stray cattle on highway",
            "category": "Animal",
            "type": "Obstruction",
            "location": "Whitefield",
            "time": "not a time",
            "status": "",
        },
    ]


@pytest.fixture
def store(sample_rows) -> IncidentStore:
    """Store loaded from the sample rows, write scope enforced."""
    store = IncidentStore()
    store.load_from_rows(sample_rows)
    return store


@pytest.fixture
def open_store(sample_rows) -> IncidentStore:
    """Store with the legacy policy: any non-public role may act on anything."""
    store = IncidentStore(access=AccessControl(enforce_write_scope=False))
    store.load_from_rows(sample_rows)
    return store


@pytest.fixture
def access() -> AccessControl:
    return AccessControl()


@pytest.fixture
def make_incident():
    """Factory for standalone incidents."""

    def _make(
        id: str = "0",
        category: str = "Fire",
        status: IncidentStatus = IncidentStatus.NEW,
        location: str = "Koramangala",
    ) -> Incident:
        return Incident(
            id=id,
            text=f"{category} incident",
            category=category,
            type="Test",
            location=location,
            status=status,
        )

    return _make


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    """Small CSV file on disk with mixed header casing and a blank line."""
    path = tmp_path / "incidents.csv"
    path.write_text(
        "Text,Category,Type,Location,Time,Status\n"
        "Kitchen fire,Fire,Residential Fire,Koramangala,2024-03-15 08:30:00,New\n"
        "\n"
        "Phone stolen,Crime,Theft,Unknown Place,2024-03-15 09:00:00,acknowledged\n"
        "Pothole,Potholes,Road Damage,BTM Layout,,\n",
        encoding="utf-8",
    )
    return path


@pytest_asyncio.fixture
async def client(store: IncidentStore) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client with the store dependency overridden."""
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
