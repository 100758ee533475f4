# fra_dashboard/models.py
"""
Pydantic models for the dashboard's static records and computed summaries.

Fixture JSON uses camelCase keys; attributes are snake_case with camelCase
aliases, so responses serialise back to the same shape the frontend reads.
"""

import logging
from typing import List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

Number = Union[int, float]

RegionLevel = Literal["national", "state", "district", "block", "village"]

LocationType = Literal[
    "national_park",
    "biosphere_reserve",
    "wildlife_sanctuary",
    "tiger_reserve",
    "tribal_area",
]


class ClaimStatus:
    GRANTED = "Granted"
    PENDING = "Pending"
    UNDER_REVIEW = "Under Review"
    REJECTED = "Rejected"

    ALL = (GRANTED, PENDING, UNDER_REVIEW, REJECTED)


class FRAModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# ----------------------------
# Claims
# ----------------------------
class ClaimRecord(FRAModel):
    id: Optional[str] = None
    # IFR (individual) or CR (community)
    claim_type: Optional[str] = Field(default=None, alias="type")
    location_id: Optional[str] = None
    location_name: Optional[str] = None
    state: Optional[str] = None
    district: Optional[str] = None
    block: Optional[str] = None
    village: Optional[str] = None
    claim_number: Optional[str] = None
    submission_date: Optional[str] = None
    status: Optional[str] = None
    claimants: int = 0
    households: int = 0
    land_area: Number = 0
    unit: Optional[str] = None
    tribal_group: Optional[str] = None
    boundary: List[Tuple[float, float]] = Field(default_factory=list)
    rights_type: Optional[List[str]] = None
    approval_date: Optional[str] = None
    title_issued: bool = False
    title_number: Optional[str] = None

    @field_validator("claimants", "households", mode="before")
    @classmethod
    def _count_or_zero(cls, v, info: ValidationInfo):
        if v is None:
            return 0
        try:
            n = int(v)
        except (TypeError, ValueError, OverflowError):
            # OverflowError: json accepts Infinity
            logger.warning("claim %s is not numeric (%r); treating as 0", info.field_name, v)
            return 0
        if isinstance(v, float) and v != n:
            logger.warning("claim %s is fractional (%r); truncating to %d", info.field_name, v, n)
        if n < 0:
            logger.warning("claim %s is negative (%r); treating as 0", info.field_name, v)
            return 0
        return n

    @field_validator("land_area", mode="before")
    @classmethod
    def _area_or_zero(cls, v):
        if v is None:
            return 0
        if isinstance(v, (int, float)):
            return v
        try:
            return float(v)
        except (TypeError, ValueError):
            logger.warning("claim landArea is not numeric (%r); treating as 0", v)
            return 0


# ----------------------------
# Locations
# ----------------------------
class Coordinates(FRAModel):
    lat: float
    lng: float


class FRAProgress(FRAModel):
    coverage: Number = 0
    total_claims: int = 0
    granted_claims: int = 0
    pending_claims: int = 0
    rejected_claims: int = 0
    households: int = 0
    status: Optional[str] = None
    dependency: Optional[str] = None
    population_trend: Optional[str] = None


class LandUse(FRAModel):
    agricultural_land: Number = 0
    forest_cover: Number = 0
    water_bodies: Number = 0
    homesteads: Number = 0


class DataLayers(FRAModel):
    classification_model: Optional[str] = None
    groundwater_level: Optional[str] = None
    pm_gati_shakti_score: Number = 0


class RiskMetrics(FRAModel):
    fire_level: Optional[str] = None
    fire_percentage: Number = 0
    biodiversity_index: Number = 0
    endangered_species: Number = 0
    conservation_status: Optional[str] = None


class SchemeEligibility(FRAModel):
    pm_kisan: bool = False
    mgnrega: bool = False
    jal_jeevan: bool = False
    pmay: bool = False


class LocationRecord(FRAModel):
    id: str
    name: str
    location_type: LocationType = Field(alias="type")
    state: str
    district: str
    villages: List[str] = Field(default_factory=list)
    coordinates: Optional[Coordinates] = None
    boundary: List[Tuple[float, float]] = Field(default_factory=list)
    tribal_groups: List[str] = Field(default_factory=list)
    fra_progress: Optional[FRAProgress] = None
    land_use: Optional[LandUse] = None
    data_layers: Optional[DataLayers] = None
    risk: Optional[RiskMetrics] = None
    schemes: Optional[SchemeEligibility] = None


class Scheme(FRAModel):
    id: str
    name: str
    full_name: Optional[str] = None
    description: Optional[str] = None
    ministry: Optional[str] = None
    eligibility: Optional[str] = None
    benefits: Optional[str] = None
    launch_year: Optional[int] = None
    website: Optional[str] = None


# ----------------------------
# Computed summaries
# ----------------------------
class ProgressSummary(FRAModel):
    # set only on precomputed fixture rows
    state: Optional[str] = None
    district: Optional[str] = None

    total_claims: int = 0
    granted_claims: int = 0
    pending_claims: int = 0
    rejected_claims: int = 0
    under_review_claims: int = 0
    coverage: int = 0
    households: int = 0


class RegionProgress(FRAModel):
    name: str
    level: RegionLevel
    data: ProgressSummary


class HierarchicalProgress(FRAModel):
    level: RegionLevel
    name: str
    data: ProgressSummary
    children: Optional[List[RegionProgress]] = None


class FilterState(FRAModel):
    """Sidebar filter; empty string and None both mean 'not set'."""

    state: Optional[str] = None
    district: Optional[str] = None
    village: Optional[str] = None
    tribal_group: Optional[str] = None


class AggregatedFRAProgress(FRAModel):
    coverage: int
    total_claims: int
    granted_claims: int
    pending_claims: int
    rejected_claims: int
    households: int
    status: str
    dependency: str
    population_trend: str


class AggregatedLocationStats(FRAModel):
    fra_progress: AggregatedFRAProgress
    land_use: LandUse
    risk: RiskMetrics
    schemes: SchemeEligibility
    data_layers: DataLayers
    location_count: int


class SchemeStat(FRAModel):
    id: str
    name: str
    eligible: int
    total: int
    percentage: int


class StatisticsOverview(FRAModel):
    state_count: int
    total_claims: int
    granted_claims: int
    pending_claims: int
    rejected_claims: int
    households: int
    average_coverage: int
