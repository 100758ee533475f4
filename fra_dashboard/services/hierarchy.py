# fra_dashboard/services/hierarchy.py
"""
Hierarchical (national -> state -> district -> block -> village) roll-up of claims.

The level is chosen from whichever filter fields are set, most specific first,
but a level only applies when its whole ancestor chain is present: a village
without its block, district and state falls back to the national view.
"""

from typing import List, Optional, Sequence

from fra_dashboard import config
from fra_dashboard.models import ClaimRecord, HierarchicalProgress, RegionProgress
from fra_dashboard.services.claims_aggregator import (
    aggregate_block_progress,
    aggregate_claims,
    aggregate_district_progress,
    aggregate_state_progress,
    aggregate_village_progress,
    claims_in_block,
    claims_in_district,
    claims_in_state,
)
from fra_dashboard.utils import distinct_sorted, is_set


# ----------------------------
# Distinct child values
# ----------------------------
def get_states(claims: Sequence[ClaimRecord]) -> List[str]:
    return distinct_sorted(c.state for c in claims)


def get_districts_for_state(claims: Sequence[ClaimRecord], state: str) -> List[str]:
    return distinct_sorted(c.district for c in claims_in_state(claims, state))


def get_blocks_for_district(claims: Sequence[ClaimRecord], district: str, state: str) -> List[str]:
    return distinct_sorted(c.block for c in claims_in_district(claims, district, state))


def get_villages_for_block(
    claims: Sequence[ClaimRecord], block: str, district: str, state: str
) -> List[str]:
    return distinct_sorted(c.village for c in claims_in_block(claims, block, district, state))


# ----------------------------
# Child progress lists
# ----------------------------
def get_state_progress_list(claims: Sequence[ClaimRecord]) -> List[RegionProgress]:
    return [
        RegionProgress(name=state, level="state", data=aggregate_state_progress(claims, state))
        for state in get_states(claims)
    ]


def get_district_progress_list(claims: Sequence[ClaimRecord], state: str) -> List[RegionProgress]:
    return [
        RegionProgress(
            name=district,
            level="district",
            data=aggregate_district_progress(claims, district, state),
        )
        for district in get_districts_for_state(claims, state)
    ]


def get_block_progress_list(
    claims: Sequence[ClaimRecord], district: str, state: str
) -> List[RegionProgress]:
    return [
        RegionProgress(
            name=block,
            level="block",
            data=aggregate_block_progress(claims, block, district, state),
        )
        for block in get_blocks_for_district(claims, district, state)
    ]


def get_village_progress_list(
    claims: Sequence[ClaimRecord], block: str, district: str, state: str
) -> List[RegionProgress]:
    return [
        RegionProgress(
            name=village,
            level="village",
            data=aggregate_village_progress(claims, village, block, district, state),
        )
        for village in get_villages_for_block(claims, block, district, state)
    ]


# ----------------------------
# Resolver
# ----------------------------
def get_hierarchical_progress(
    claims: Sequence[ClaimRecord],
    state: Optional[str] = None,
    district: Optional[str] = None,
    block: Optional[str] = None,
    village: Optional[str] = None,
) -> HierarchicalProgress:
    """
    Summary for the most specific fully-qualified level, plus one summary per
    child region one level down (villages have no children).
    """
    has_state = is_set(state)
    has_district = has_state and is_set(district)
    has_block = has_district and is_set(block)
    has_village = has_block and is_set(village)

    if has_village:
        return HierarchicalProgress(
            level="village",
            name=village,
            data=aggregate_village_progress(claims, village, block, district, state),
        )

    if has_block:
        return HierarchicalProgress(
            level="block",
            name=block,
            data=aggregate_block_progress(claims, block, district, state),
            children=get_village_progress_list(claims, block, district, state),
        )

    if has_district:
        return HierarchicalProgress(
            level="district",
            name=district,
            data=aggregate_district_progress(claims, district, state),
            children=get_block_progress_list(claims, district, state),
        )

    if has_state:
        return HierarchicalProgress(
            level="state",
            name=state,
            data=aggregate_state_progress(claims, state),
            children=get_district_progress_list(claims, state),
        )

    return HierarchicalProgress(
        level="national",
        name=config.NATIONAL_LABEL,
        data=aggregate_claims(claims),
        children=get_state_progress_list(claims),
    )
