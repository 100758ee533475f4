# fra_dashboard/routes/locations.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from fra_dashboard.data import DashboardData, get_dashboard_data
from fra_dashboard.models import AggregatedLocationStats, FilterState, LocationRecord
from fra_dashboard.services.location_filter import (
    apply_filter_state,
    get_districts_for_state,
    get_filter_summary,
    get_tribal_groups,
    get_unique_states,
    get_villages_for_district,
    has_active_filters,
    search_locations,
)
from fra_dashboard.services.location_stats import get_aggregated_stats

router = APIRouter(tags=["locations"])
logger = logging.getLogger(__name__)


def location_filters(
    state: Optional[str] = None,
    district: Optional[str] = None,
    village: Optional[str] = None,
    tribal_group: Optional[str] = Query(None, alias="tribalGroup"),
) -> FilterState:
    return FilterState(state=state, district=district, village=village, tribal_group=tribal_group)


@router.get("/locations")
async def list_locations(
    filters: FilterState = Depends(location_filters),
    q: Optional[str] = None,
    data: DashboardData = Depends(get_dashboard_data),
):
    """
    Locations matching the sidebar filters. Village and tribal group match
    whole entries of each location's lists; ``q`` then narrows by substring.
    """
    try:
        matched = search_locations(apply_filter_state(data.locations, filters), q)
    except Exception as e:
        logger.exception("list_locations failed: filters=%s q=%s", filters, q)
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "count": len(matched),
        "filtered": has_active_filters(filters),
        "summary": get_filter_summary(filters),
        "locations": [loc.model_dump(by_alias=True) for loc in matched],
    }


@router.get("/locations/stats", response_model=AggregatedLocationStats)
async def location_stats(
    filters: FilterState = Depends(location_filters),
    data: DashboardData = Depends(get_dashboard_data),
):
    try:
        stats = get_aggregated_stats(apply_filter_state(data.locations, filters))
    except Exception as e:
        logger.exception("location_stats failed: filters=%s", filters)
        raise HTTPException(status_code=500, detail=str(e))

    if stats is None:
        raise HTTPException(status_code=404, detail="No locations match the given filters")
    return stats


@router.get("/locations/options")
async def location_options(
    state: Optional[str] = None,
    district: Optional[str] = None,
    data: DashboardData = Depends(get_dashboard_data),
):
    """Dropdown values; districts need a state, villages need both."""
    return {
        "states": get_unique_states(data.locations),
        "districts": get_districts_for_state(data.locations, state) if state else [],
        "villages": (
            get_villages_for_district(data.locations, state, district)
            if state and district else []
        ),
        "tribalGroups": get_tribal_groups(data.locations),
    }


@router.get("/locations/{location_id}", response_model=LocationRecord)
async def get_location(
    location_id: str = Path(..., min_length=1),
    data: DashboardData = Depends(get_dashboard_data),
):
    loc = data.get_location(location_id)
    if loc is None:
        raise HTTPException(status_code=404, detail="Location not found")
    return loc
