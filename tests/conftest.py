"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fra_dashboard import config
from fra_dashboard.data import DashboardData, get_dashboard_data, load_dashboard_data
from fra_dashboard.models import ClaimRecord, LocationRecord


def make_claim(**fields) -> ClaimRecord:
    return ClaimRecord(**fields)


def make_location(id: str, state: str, district: str, **fields) -> LocationRecord:
    fields.setdefault("name", id.title())
    fields.setdefault("location_type", "tribal_area")
    return LocationRecord(id=id, state=state, district=district, **fields)


@pytest.fixture
def claims() -> list[ClaimRecord]:
    """Two states, with Odisha spread over two districts and two blocks."""
    rows = [
        ("Odisha", "Mayurbhanj", "Jashipur", "Jamuna", "Granted", 3),
        ("Odisha", "Mayurbhanj", "Jashipur", "Jamuna", "Pending", 2),
        ("Odisha", "Mayurbhanj", "Jashipur", "Gudugudia", "Granted", 1),
        ("Odisha", "Mayurbhanj", "Karanjia", "Tato", "Rejected", 4),
        ("Odisha", "Kandhamal", "Phulbani", "Sudrukumpa", "Under Review", 1),
        ("Tripura", "Dhalai", "Ambassa", "Kulai", "Granted", 2),
    ]
    return [
        make_claim(
            id=f"C{i}", state=s, district=d, block=b, village=v, status=st, households=hh
        )
        for i, (s, d, b, v, st, hh) in enumerate(rows, start=1)
    ]


@pytest.fixture
def locations() -> list[LocationRecord]:
    return [
        make_location(
            "kaziranga", "Assam", "Golaghat",
            location_type="national_park",
            villages=["Kohora", "Bochagaon"],
            tribal_groups=["Mishing", "Karbi"],
        ),
        make_location(
            "kohoragaon", "Assam", "Karbi Anglong",
            villages=["Kohoragaon"],
            tribal_groups=["Karbi"],
        ),
        make_location(
            "similipal", "Odisha", "Mayurbhanj",
            location_type="biosphere_reserve",
            villages=["Jamuna", "Gudugudia"],
            tribal_groups=["Santal", "Kolha"],
        ),
        make_location(
            "kandhamal", "Odisha", "Kandhamal",
            villages=["Sudrukumpa"],
        ),
    ]


@pytest.fixture(scope="session")
def bundled_data() -> DashboardData:
    return load_dashboard_data(config.DEFAULT_DATA_DIR)


@pytest.fixture
def client(bundled_data: DashboardData) -> TestClient:
    from fra_dashboard.main import app

    app.dependency_overrides[get_dashboard_data] = lambda: bundled_data
    yield TestClient(app)
    app.dependency_overrides.clear()
