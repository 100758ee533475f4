# fra_dashboard/services/claims_aggregator.py
"""
Reduce claim records to progress summaries, optionally scoped to one region.
"""

from typing import List, Sequence

from fra_dashboard.models import ClaimRecord, ClaimStatus, ProgressSummary
from fra_dashboard.utils import percentage


def aggregate_claims(claims: Sequence[ClaimRecord]) -> ProgressSummary:
    """
    Count claims by status and derive coverage (% granted).

    Claims whose status is not one of the four known values still count
    towards the total but towards none of the status buckets.
    """
    granted = pending = rejected = under_review = 0
    households = 0

    for claim in claims:
        if claim.status == ClaimStatus.GRANTED:
            granted += 1
        elif claim.status == ClaimStatus.PENDING:
            pending += 1
        elif claim.status == ClaimStatus.REJECTED:
            rejected += 1
        elif claim.status == ClaimStatus.UNDER_REVIEW:
            under_review += 1
        households += claim.households or 0

    total = len(claims)
    return ProgressSummary(
        total_claims=total,
        granted_claims=granted,
        pending_claims=pending,
        rejected_claims=rejected,
        under_review_claims=under_review,
        coverage=percentage(granted, total),
        households=households,
    )


# ----------------------------
# Geography-scoped wrappers
# ----------------------------
def claims_in_state(claims: Sequence[ClaimRecord], state: str) -> List[ClaimRecord]:
    return [c for c in claims if c.state is not None and c.state == state]


def claims_in_district(claims: Sequence[ClaimRecord], district: str, state: str) -> List[ClaimRecord]:
    return [
        c for c in claims_in_state(claims, state)
        if c.district is not None and c.district == district
    ]


def claims_in_block(
    claims: Sequence[ClaimRecord], block: str, district: str, state: str
) -> List[ClaimRecord]:
    return [
        c for c in claims_in_district(claims, district, state)
        if c.block is not None and c.block == block
    ]


def claims_in_village(
    claims: Sequence[ClaimRecord], village: str, block: str, district: str, state: str
) -> List[ClaimRecord]:
    return [
        c for c in claims_in_block(claims, block, district, state)
        if c.village is not None and c.village == village
    ]


def aggregate_state_progress(claims: Sequence[ClaimRecord], state: str) -> ProgressSummary:
    return aggregate_claims(claims_in_state(claims, state))


def aggregate_district_progress(
    claims: Sequence[ClaimRecord], district: str, state: str
) -> ProgressSummary:
    return aggregate_claims(claims_in_district(claims, district, state))


def aggregate_block_progress(
    claims: Sequence[ClaimRecord], block: str, district: str, state: str
) -> ProgressSummary:
    return aggregate_claims(claims_in_block(claims, block, district, state))


def aggregate_village_progress(
    claims: Sequence[ClaimRecord], village: str, block: str, district: str, state: str
) -> ProgressSummary:
    return aggregate_claims(claims_in_village(claims, village, block, district, state))


# ----------------------------
# Diagnostics
# ----------------------------
def find_malformed_claims(claims: Sequence[ClaimRecord]) -> List[str]:
    """Return one message per claim whose status falls outside the known set."""
    problems: List[str] = []
    for idx, claim in enumerate(claims):
        if claim.status not in ClaimStatus.ALL:
            ident = claim.id or f"#{idx}"
            problems.append(f"claim {ident} has unrecognised status {claim.status!r}")
    return problems
