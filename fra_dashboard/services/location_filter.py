# fra_dashboard/services/location_filter.py
from typing import List, Optional, Sequence

from fra_dashboard.models import FilterState, LocationRecord
from fra_dashboard.utils import distinct_sorted, is_set


def filter_locations(
    locations: Sequence[LocationRecord],
    state: Optional[str] = None,
    district: Optional[str] = None,
    village: Optional[str] = None,
    tribal_group: Optional[str] = None,
) -> List[LocationRecord]:
    """
    Narrow locations by state, district, village and tribal group (all ANDed).

    Unset facets are skipped. Village and tribal group match an exact entry
    of the location's list, never a substring. The input is left untouched;
    a new list is always returned in the original order.
    """
    filtered = list(locations)

    if is_set(state):
        filtered = [loc for loc in filtered if loc.state == state]

    if is_set(district):
        filtered = [loc for loc in filtered if loc.district == district]

    if is_set(village):
        filtered = [loc for loc in filtered if village in (loc.villages or [])]

    # tribal group is independent of the state/district/village chain
    if is_set(tribal_group):
        filtered = [loc for loc in filtered if tribal_group in (loc.tribal_groups or [])]

    return filtered


def search_locations(
    locations: Sequence[LocationRecord], query: Optional[str]
) -> List[LocationRecord]:
    """
    Free-text sidebar search: case-insensitive substring match on name,
    district, state, any village or any tribal group.
    """
    if not is_set(query):
        return list(locations)

    needle = query.strip().lower()

    def hit(loc: LocationRecord) -> bool:
        fields = [loc.name, loc.district, loc.state, *loc.villages, *loc.tribal_groups]
        return any(needle in f.lower() for f in fields)

    return [loc for loc in locations if hit(loc)]


def apply_filter_state(
    locations: Sequence[LocationRecord], filters: FilterState
) -> List[LocationRecord]:
    return filter_locations(
        locations,
        state=filters.state,
        district=filters.district,
        village=filters.village,
        tribal_group=filters.tribal_group,
    )


def has_active_filters(filters: FilterState) -> bool:
    return any(
        is_set(v)
        for v in (filters.state, filters.district, filters.village, filters.tribal_group)
    )


def get_filter_summary(filters: FilterState) -> str:
    """Human-readable description of the active filters, most specific first."""
    parts: List[str] = []
    if is_set(filters.village):
        parts.append(filters.village)
    if is_set(filters.district):
        parts.append(filters.district)
    if is_set(filters.state):
        parts.append(filters.state)
    if is_set(filters.tribal_group):
        parts.append(f"Tribal Group: {filters.tribal_group}")
    return ", ".join(parts) if parts else "All Locations"


# ----------------------------
# Dropdown options
# ----------------------------
def get_unique_states(locations: Sequence[LocationRecord]) -> List[str]:
    return distinct_sorted(loc.state for loc in locations)


def get_districts_for_state(locations: Sequence[LocationRecord], state: str) -> List[str]:
    return distinct_sorted(loc.district for loc in locations if loc.state == state)


def get_villages_for_district(
    locations: Sequence[LocationRecord], state: str, district: str
) -> List[str]:
    villages = [
        v
        for loc in locations
        if loc.state == state and loc.district == district
        for v in loc.villages
    ]
    return sorted(villages)


def get_tribal_groups(locations: Sequence[LocationRecord]) -> List[str]:
    return distinct_sorted(g for loc in locations for g in loc.tribal_groups)
