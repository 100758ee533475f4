# fra_dashboard/routes/progress.py
import io
import logging
from typing import List, Optional

import pandas as pd
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from fra_dashboard.data import DashboardData, get_dashboard_data
from fra_dashboard.models import HierarchicalProgress, RegionProgress
from fra_dashboard.services.hierarchy import get_hierarchical_progress, get_state_progress_list

router = APIRouter(tags=["progress"])
logger = logging.getLogger(__name__)

EXPORT_COLUMNS = [
    "level", "name", "totalClaims", "grantedClaims", "pendingClaims",
    "rejectedClaims", "underReviewClaims", "coverage", "households",
]


@router.get("/progress", response_model=HierarchicalProgress, response_model_exclude_none=True)
async def get_progress(
    state: Optional[str] = None,
    district: Optional[str] = None,
    block: Optional[str] = None,
    village: Optional[str] = None,
    data: DashboardData = Depends(get_dashboard_data),
):
    """
    Claim progress for the most specific level the filters fully describe,
    with one entry per child region one level down.
    """
    try:
        return get_hierarchical_progress(
            data.claims, state=state, district=district, block=block, village=village
        )
    except Exception as e:
        logger.exception(
            "get_progress failed: state=%s district=%s block=%s village=%s",
            state, district, block, village,
        )
        raise HTTPException(status_code=500, detail=str(e))


@router.get(
    "/progress/states",
    response_model=List[RegionProgress],
    response_model_exclude_none=True,
)
async def list_state_progress(data: DashboardData = Depends(get_dashboard_data)):
    return get_state_progress_list(data.claims)


def progress_frame(progress: HierarchicalProgress) -> pd.DataFrame:
    """One row for the resolved region followed by one per child."""
    regions = [(progress.level, progress.name, progress.data)]
    regions += [(c.level, c.name, c.data) for c in (progress.children or [])]

    rows = []
    for level, name, summary in regions:
        row = {"level": level, "name": name}
        row.update(summary.model_dump(by_alias=True, exclude={"state", "district"}))
        rows.append(row)
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


@router.get("/export/progress.csv")
async def export_progress_csv(
    state: Optional[str] = None,
    district: Optional[str] = None,
    block: Optional[str] = None,
    village: Optional[str] = None,
    data: DashboardData = Depends(get_dashboard_data),
):
    progress = get_hierarchical_progress(
        data.claims, state=state, district=district, block=block, village=village
    )
    try:
        buf = io.StringIO()
        progress_frame(progress).to_csv(buf, index=False)
    except Exception as e:
        logger.exception("export_progress_csv failed for level=%s name=%s", progress.level, progress.name)
        raise HTTPException(status_code=500, detail=str(e))

    buf.seek(0)
    filename = f"progress-{progress.level}.csv"
    return StreamingResponse(
        iter([buf.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
