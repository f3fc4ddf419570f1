"""
Business-type (vertical) catalog and classifier.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BusinessType:
    id: str
    label: str
    goal: int


# Order matters: the first id contained in the input wins.
BUSINESS_TYPES: tuple[BusinessType, ...] = (
    BusinessType(id="cleaning", label="Cleaning Services", goal=62),
    BusinessType(id="photobooth", label="Photobooth Business", goal=48),
    BusinessType(id="courses", label="Gold Wealth Academy", goal=32),
)

BASELINE_BUSINESS_TYPE = "cleaning"
COURSES_BUSINESS_TYPE = "courses"


def normalize(raw: Any) -> str:
    """
    Map a free-text or enum-like label to a canonical business-type id.

    Matching is by substring on the id or the display label, so
    "I run a cleaning company" classifies as "cleaning" and
    "Gold Wealth Academy" as "courses". Anything unrecognized collapses to
    the baseline id.
    """
    if not raw:
        return BASELINE_BUSINESS_TYPE
    candidate = str(raw).lower()
    for business_type in BUSINESS_TYPES:
        if business_type.id in candidate or business_type.label.lower() in candidate:
            return business_type.id
    return BASELINE_BUSINESS_TYPE
