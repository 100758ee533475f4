# fra_dashboard/services/statistics.py
"""
Figures for the statistics page: totals over the precomputed per-state
summaries, and how many locations qualify for each government scheme.
"""

import logging
from typing import List, Sequence

from fra_dashboard.models import (
    LocationRecord,
    ProgressSummary,
    SchemeEligibility,
    Scheme,
    SchemeStat,
    StatisticsOverview,
)
from fra_dashboard.utils import percentage, round_half_up

logger = logging.getLogger(__name__)


def summarize_state_summaries(summaries: Sequence[ProgressSummary]) -> StatisticsOverview:
    if not summaries:
        return StatisticsOverview(
            state_count=0,
            total_claims=0,
            granted_claims=0,
            pending_claims=0,
            rejected_claims=0,
            households=0,
            average_coverage=0,
        )

    return StatisticsOverview(
        state_count=len(summaries),
        total_claims=sum(s.total_claims for s in summaries),
        granted_claims=sum(s.granted_claims for s in summaries),
        pending_claims=sum(s.pending_claims for s in summaries),
        rejected_claims=sum(s.rejected_claims for s in summaries),
        households=sum(s.households for s in summaries),
        average_coverage=round_half_up(sum(s.coverage for s in summaries) / len(summaries)),
    )


def _flag_key(name: str) -> str:
    # "pm_kisan", "pmKisan" and "PMKISAN" all name the same scheme flag
    return name.replace("_", "").lower()


_FLAG_FIELDS = {_flag_key(f): f for f in SchemeEligibility.model_fields}


def scheme_eligibility_stats(
    schemes: Sequence[Scheme], locations: Sequence[LocationRecord]
) -> List[SchemeStat]:
    total = len(locations)
    stats: List[SchemeStat] = []
    for scheme in schemes:
        field_name = _FLAG_FIELDS.get(_flag_key(scheme.id))
        if field_name is None:
            logger.warning("scheme %s has no eligibility flag on locations", scheme.id)
            eligible = 0
        else:
            eligible = sum(
                1 for loc in locations
                if loc.schemes is not None and getattr(loc.schemes, field_name)
            )
        stats.append(SchemeStat(
            id=scheme.id,
            name=scheme.name,
            eligible=eligible,
            total=total,
            percentage=percentage(eligible, total),
        ))
    return stats
