# fra_dashboard/data.py
"""
One-shot loading of the static dashboard fixtures.

The JSON files are read once, validated into frozen models and handed to the
aggregation code as plain tuples. Nothing here is written back.
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from fra_dashboard import config
from fra_dashboard.models import ClaimRecord, LocationRecord, ProgressSummary, Scheme
from fra_dashboard.services.claims_aggregator import find_malformed_claims

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class DataLoadError(ValueError):
    """A fixture file exists but could not be parsed into records."""


@dataclass(frozen=True)
class DashboardData:
    claims: Tuple[ClaimRecord, ...] = ()
    locations: Tuple[LocationRecord, ...] = ()
    schemes: Tuple[Scheme, ...] = ()
    # precomputed per-state and per-district rows shipped with the claims file
    state_summaries: Tuple[ProgressSummary, ...] = ()
    district_summaries: Tuple[ProgressSummary, ...] = ()

    def get_location(self, location_id: str) -> Optional[LocationRecord]:
        for loc in self.locations:
            if loc.id == location_id:
                return loc
        return None


# ----------------------------
# JSON helpers
# ----------------------------
def _read_json(path: Path) -> Any:
    if not path.exists():
        logger.error("Fixture file not found: %s", path)
        raise FileNotFoundError(f"Fixture file does not exist: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s: %s", path, e)
        raise DataLoadError(f"{path.name}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        logger.error("%s is not UTF-8: %s", path, e)
        raise DataLoadError(f"{path.name}: not valid UTF-8 ({e.reason} at byte {e.start})") from e


def _records(payload: Any, key: str, source: str) -> List[Dict[str, Any]]:
    # files are either {"<key>": [...]} or a bare list
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get(key), list):
        return payload[key]
    raise DataLoadError(f"{source}: expected a list or an object with a '{key}' list")


def _parse(model: Type[M], rows: List[Dict[str, Any]], source: str) -> Tuple[M, ...]:
    parsed = []
    for idx, row in enumerate(rows):
        try:
            parsed.append(model.model_validate(row))
        except ValidationError as e:
            logger.error("%s: record %d failed validation: %s", source, idx, e)
            raise DataLoadError(f"{source}: record {idx} is invalid ({e.error_count()} errors)") from e
    return tuple(parsed)


# ----------------------------
# Loaders
# ----------------------------
def load_claims(path: Path) -> Tuple[Tuple[ClaimRecord, ...], Dict[str, Tuple[ProgressSummary, ...]]]:
    """Claims plus the optional ``progressSummary`` rows, keyed ``byState`` / ``byDistrict``."""
    payload = _read_json(path)
    claims = _parse(ClaimRecord, _records(payload, "claims", path.name), path.name)

    summaries: Dict[str, Tuple[ProgressSummary, ...]] = {}
    progress = payload.get("progressSummary") if isinstance(payload, dict) else None
    for key in ("byState", "byDistrict"):
        rows = (progress or {}).get(key) or []
        summaries[key] = _parse(ProgressSummary, rows, f"{path.name} progressSummary.{key}")

    for problem in find_malformed_claims(claims):
        logger.warning("%s: %s", path.name, problem)

    return claims, summaries


def load_locations(path: Path) -> Tuple[LocationRecord, ...]:
    payload = _read_json(path)
    return _parse(LocationRecord, _records(payload, "locations", path.name), path.name)


def load_schemes(path: Path) -> Tuple[Scheme, ...]:
    if not path.exists():
        logger.warning("No schemes file at %s; scheme statistics will be empty", path)
        return ()
    payload = _read_json(path)
    return _parse(Scheme, _records(payload, "schemes", path.name), path.name)


def load_dashboard_data(data_dir: Optional[Union[str, Path]] = None) -> DashboardData:
    """
    Read claims, locations and schemes from ``data_dir`` (default: FRA_DATA_DIR).

    Raises:
        FileNotFoundError: the directory, claims file or locations file is missing
        DataLoadError: a file is not valid JSON or a record fails validation
    """
    folder = Path(data_dir) if data_dir is not None else config.DATA_DIR

    if not folder.is_dir():
        logger.error("Data directory not found: %s", folder)
        raise FileNotFoundError(f"Data directory does not exist: {folder}")

    claims, summaries = load_claims(folder / config.CLAIMS_FILE)
    locations = load_locations(folder / config.LOCATIONS_FILE)
    schemes = load_schemes(folder / config.SCHEMES_FILE)

    logger.info(
        "Loaded %d claims, %d locations, %d schemes from %s",
        len(claims), len(locations), len(schemes), folder,
    )
    return DashboardData(
        claims=claims,
        locations=locations,
        schemes=schemes,
        state_summaries=summaries["byState"],
        district_summaries=summaries["byDistrict"],
    )


# ----------------------------
# FastAPI dependency
# ----------------------------
@lru_cache(maxsize=1)
def get_dashboard_data() -> DashboardData:
    return load_dashboard_data()
