"""Tests for loading the static fixtures."""

from __future__ import annotations

import json
import logging

import pytest

from fra_dashboard.data import DataLoadError, load_dashboard_data


def _write(folder, name, payload):
    path = folder / name
    path.write_text(json.dumps(payload) if not isinstance(payload, str) else payload, encoding="utf-8")
    return path


LOCATION = {
    "id": "LOC-1", "name": "Similipal", "type": "biosphere_reserve",
    "state": "Odisha", "district": "Mayurbhanj", "villages": ["Jamuna"],
    "tribalGroups": ["Santal"],
    "fraProgress": {"coverage": 67, "totalClaims": 10, "grantedClaims": 7},
}


@pytest.fixture
def data_dir(tmp_path):
    _write(tmp_path, "claims.json", {
        "claims": [
            {"id": "C1", "state": "Odisha", "district": "Mayurbhanj", "status": "Granted", "households": 2},
            {"id": "C2", "state": "Odisha", "district": "Mayurbhanj", "status": "Pending"},
        ],
        "progressSummary": {
            "byState": [{"state": "Odisha", "totalClaims": 2, "grantedClaims": 1, "coverage": 50}],
        },
    })
    _write(tmp_path, "locations.json", {"locations": [LOCATION]})
    _write(tmp_path, "schemes.json", {"schemes": [{"id": "pmay", "name": "PMAY-G"}]})
    return tmp_path


class TestBundledFixtures:
    def test_loads(self, bundled_data):
        assert len(bundled_data.claims) > 0
        assert len(bundled_data.locations) > 0
        assert len(bundled_data.schemes) == 4
        assert {s.state for s in bundled_data.state_summaries} == {
            "Madhya Pradesh", "Odisha", "Tripura", "Telangana",
        }
        assert [d.district for d in bundled_data.district_summaries] == ["Mandla", "Mayurbhanj"]

    def test_claim_statuses_are_known(self, bundled_data):
        from fra_dashboard.services.claims_aggregator import find_malformed_claims

        assert find_malformed_claims(bundled_data.claims) == []

    def test_location_lookup(self, bundled_data):
        assert bundled_data.get_location("LOC-KANHA").district == "Mandla"
        assert bundled_data.get_location("nope") is None


class TestLoadDashboardData:
    def test_reads_all_files(self, data_dir):
        data = load_dashboard_data(data_dir)
        assert [c.id for c in data.claims] == ["C1", "C2"]
        assert data.claims[0].households == 2
        assert data.locations[0].fra_progress.coverage == 67
        assert data.locations[0].tribal_groups == ["Santal"]
        assert data.schemes[0].id == "pmay"
        assert data.state_summaries[0].coverage == 50

    def test_collections_are_tuples(self, data_dir):
        data = load_dashboard_data(data_dir)
        assert isinstance(data.claims, tuple)
        assert isinstance(data.locations, tuple)

    def test_bare_lists_accepted(self, tmp_path):
        _write(tmp_path, "claims.json", [{"id": "C1", "status": "Granted"}])
        _write(tmp_path, "locations.json", [LOCATION])
        data = load_dashboard_data(tmp_path)
        assert len(data.claims) == 1
        assert data.state_summaries == ()

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_dashboard_data(tmp_path / "absent")

    def test_missing_locations_file(self, data_dir):
        (data_dir / "locations.json").unlink()
        with pytest.raises(FileNotFoundError):
            load_dashboard_data(data_dir)

    def test_missing_schemes_file_is_tolerated(self, data_dir, caplog):
        (data_dir / "schemes.json").unlink()
        data = load_dashboard_data(data_dir)
        assert data.schemes == ()
        assert "schemes" in caplog.text

    def test_invalid_json(self, data_dir):
        _write(data_dir, "claims.json", "{not json")
        with pytest.raises(DataLoadError, match="claims.json"):
            load_dashboard_data(data_dir)

    def test_invalid_location_type(self, data_dir):
        _write(data_dir, "locations.json", {"locations": [dict(LOCATION, type="city")]})
        with pytest.raises(DataLoadError, match="record 0"):
            load_dashboard_data(data_dir)

    def test_wrong_top_level_shape(self, data_dir):
        _write(data_dir, "locations.json", {"items": []})
        with pytest.raises(DataLoadError, match="locations"):
            load_dashboard_data(data_dir)

    def test_malformed_status_is_logged_not_fatal(self, data_dir, caplog):
        _write(data_dir, "claims.json", {"claims": [{"id": "C9", "status": "Approved"}]})
        with caplog.at_level(logging.WARNING, logger="fra_dashboard.data"):
            data = load_dashboard_data(data_dir)
        assert len(data.claims) == 1
        assert "C9" in caplog.text

    def test_infinite_household_count_becomes_zero(self, data_dir):
        # json accepts the non-standard Infinity literal
        _write(data_dir, "claims.json", '{"claims": [{"id": "C1", "status": "Granted", "households": Infinity}]}')
        data = load_dashboard_data(data_dir)
        assert data.claims[0].households == 0

    def test_non_utf8_file(self, data_dir):
        (data_dir / "claims.json").write_bytes(b'{"claims": [{"id": "\xff"}]}')
        with pytest.raises(DataLoadError, match="claims.json"):
            load_dashboard_data(data_dir)

    def test_district_summaries(self, data_dir):
        _write(data_dir, "claims.json", {
            "claims": [],
            "progressSummary": {
                "byDistrict": [{"state": "Odisha", "district": "Mayurbhanj", "totalClaims": 4, "coverage": 75}],
            },
        })
        data = load_dashboard_data(data_dir)
        assert data.state_summaries == ()
        assert data.district_summaries[0].district == "Mayurbhanj"
        assert data.district_summaries[0].coverage == 75
