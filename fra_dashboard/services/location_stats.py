# fra_dashboard/services/location_stats.py
"""
Combine a set of (filtered) locations into one dashboard card.

Counts are summed, percentages and scores averaged, categorical fields take
their most common value. The precomputed ``fraProgress.coverage`` of each
location is used as-is; it is not re-derived from claim records.
"""

from typing import Dict, List, Optional, Sequence

from fra_dashboard.models import (
    AggregatedFRAProgress,
    AggregatedLocationStats,
    DataLayers,
    LandUse,
    LocationRecord,
    RiskMetrics,
    SchemeEligibility,
)
from fra_dashboard.utils import round_half_up


def most_common(values: Sequence[str]) -> Optional[str]:
    """Mode of ``values``; ties go to whichever value appeared first."""
    if not values:
        return None

    counts: Dict[str, int] = {}
    for v in values:
        counts[v] = counts.get(v, 0) + 1

    best, best_count = values[0], 0
    # dicts keep first-insertion order, so a strict > keeps the earliest on ties
    for v, n in counts.items():
        if n > best_count:
            best, best_count = v, n
    return best


def _mean(total: float, n: int) -> int:
    return round_half_up(total / n)


def _mode_or(values: List[Optional[str]], default: str) -> str:
    return most_common([v for v in values if v]) or default


def get_aggregated_stats(locations: Sequence[LocationRecord]) -> Optional[AggregatedLocationStats]:
    if not locations:
        return None

    n = len(locations)
    progress = [loc.fra_progress for loc in locations if loc.fra_progress]
    land = [loc.land_use for loc in locations if loc.land_use]
    risk = [loc.risk for loc in locations if loc.risk]
    layers = [loc.data_layers for loc in locations if loc.data_layers]
    schemes = [loc.schemes for loc in locations if loc.schemes]

    fra_progress = AggregatedFRAProgress(
        coverage=_mean(sum(p.coverage for p in progress), n),
        total_claims=sum(p.total_claims for p in progress),
        granted_claims=sum(p.granted_claims for p in progress),
        pending_claims=sum(p.pending_claims for p in progress),
        rejected_claims=sum(p.rejected_claims for p in progress),
        households=sum(p.households for p in progress),
        status=_mode_or([p.status for p in progress], "Active"),
        dependency=_mode_or([p.dependency for p in progress], "Medium"),
        population_trend=_mode_or([p.population_trend for p in progress], "Stable"),
    )

    land_use = LandUse(
        agricultural_land=_mean(sum(u.agricultural_land for u in land), n),
        forest_cover=_mean(sum(u.forest_cover for u in land), n),
        water_bodies=_mean(sum(u.water_bodies for u in land), n),
        homesteads=_mean(sum(u.homesteads for u in land), n),
    )

    risk_metrics = RiskMetrics(
        fire_level=_mode_or([r.fire_level for r in risk], "Medium"),
        fire_percentage=_mean(sum(r.fire_percentage for r in risk), n),
        biodiversity_index=_mean(sum(r.biodiversity_index for r in risk), n),
        endangered_species=_mean(sum(r.endangered_species for r in risk), n),
        conservation_status=_mode_or([r.conservation_status for r in risk], "Moderate"),
    )

    # a scheme applies to the group when more than half the locations qualify
    half = n / 2
    eligibility = SchemeEligibility(
        pm_kisan=sum(1 for s in schemes if s.pm_kisan) > half,
        mgnrega=sum(1 for s in schemes if s.mgnrega) > half,
        jal_jeevan=sum(1 for s in schemes if s.jal_jeevan) > half,
        pmay=sum(1 for s in schemes if s.pmay) > half,
    )

    data_layers = DataLayers(
        classification_model=_mode_or([d.classification_model for d in layers], "CNN"),
        groundwater_level=_mode_or([d.groundwater_level for d in layers], "Moderate"),
        pm_gati_shakti_score=_mean(sum(d.pm_gati_shakti_score for d in layers), n),
    )

    return AggregatedLocationStats(
        fra_progress=fra_progress,
        land_use=land_use,
        risk=risk_metrics,
        schemes=eligibility,
        data_layers=data_layers,
        location_count=n,
    )
