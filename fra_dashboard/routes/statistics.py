# fra_dashboard/routes/statistics.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from fra_dashboard.data import DashboardData, get_dashboard_data
from fra_dashboard.models import Scheme
from fra_dashboard.services.schemes import SchemeSort, filter_schemes, get_ministries
from fra_dashboard.services.statistics import scheme_eligibility_stats, summarize_state_summaries

router = APIRouter(tags=["statistics"])
logger = logging.getLogger(__name__)


@router.get("/statistics")
async def get_statistics(data: DashboardData = Depends(get_dashboard_data)):
    """
    Totals over the precomputed per-state summaries, the raw state and
    district rows, and scheme eligibility across all locations.
    """
    try:
        overview = summarize_state_summaries(data.state_summaries)
        schemes = scheme_eligibility_stats(data.schemes, data.locations)
    except Exception as e:
        logger.exception("get_statistics failed")
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "overview": overview.model_dump(by_alias=True),
        "states": [
            s.model_dump(by_alias=True, exclude_none=True) for s in data.state_summaries
        ],
        "districts": [
            s.model_dump(by_alias=True, exclude_none=True) for s in data.district_summaries
        ],
        "schemes": [s.model_dump(by_alias=True) for s in schemes],
    }


@router.get("/schemes", response_model=List[Scheme], response_model_exclude_none=True)
async def list_schemes(
    q: Optional[str] = None,
    ministry: Optional[str] = None,
    sort: SchemeSort = "name",
    data: DashboardData = Depends(get_dashboard_data),
):
    """Scheme catalogue, searched, narrowed to one ministry and sorted by name or launch year."""
    try:
        return filter_schemes(data.schemes, query=q, ministry=ministry, sort_by=sort)
    except Exception as e:
        logger.exception("list_schemes failed: q=%s ministry=%s sort=%s", q, ministry, sort)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/schemes/ministries", response_model=List[str])
async def list_ministries(data: DashboardData = Depends(get_dashboard_data)):
    return get_ministries(data.schemes)
