# fra_dashboard/services/schemes.py
"""
Scheme catalogue: free-text search, ministry filter and ordering for the
schemes page.
"""

from typing import List, Literal, Optional, Sequence

from fra_dashboard.models import Scheme
from fra_dashboard.utils import distinct_sorted, is_set

SchemeSort = Literal["name", "year"]


def _matches(scheme: Scheme, needle: str) -> bool:
    fields = (scheme.name, scheme.full_name, scheme.description, scheme.eligibility)
    return any(needle in (f or "").lower() for f in fields)


def get_ministries(schemes: Sequence[Scheme]) -> List[str]:
    return distinct_sorted(s.ministry for s in schemes)


def filter_schemes(
    schemes: Sequence[Scheme],
    query: Optional[str] = None,
    ministry: Optional[str] = None,
    sort_by: SchemeSort = "name",
) -> List[Scheme]:
    """
    Schemes whose name, full name, description or eligibility contains
    ``query`` (case-insensitive), limited to ``ministry`` when given.

    ``sort_by="name"`` orders alphabetically ignoring case; ``"year"`` puts the
    newest launch year first, with undated schemes last.
    """
    result = list(schemes)

    if is_set(query):
        needle = query.strip().lower()
        result = [s for s in result if _matches(s, needle)]

    # "all" is what the page's dropdown sends for no ministry
    if is_set(ministry) and ministry != "all":
        result = [s for s in result if s.ministry == ministry]

    if sort_by == "year":
        result.sort(key=lambda s: (s.launch_year is None, -(s.launch_year or 0)))
    else:
        result.sort(key=lambda s: s.name.lower())
    return result
