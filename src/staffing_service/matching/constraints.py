"""License, location and capacity matchers producing 0-100 scores."""

from typing import Sequence

from ..models.license import License
from .skill_match import round_score

REMOTE = "remote"


def calculate_license_match(licenses: Sequence[License], required_ids: Sequence[str]) -> int:
    """Share of required licenses the employee holds in validated state.

    Expiry dates are not compared with the current date; only the
    validation status decides whether a license counts.
    """
    if not required_ids:
        return 100

    matched = 0
    for license_id in required_ids:
        if any(lic.id == license_id and lic.validation_status for lic in licenses):
            matched += 1

    return round_score((matched / len(required_ids)) * 100)


def calculate_location_match(location: str, acceptable: Sequence[str]) -> int:
    """100 if the employee location (or remote work) is acceptable, else 0."""
    if not acceptable:
        return 100

    here = location.lower()
    for candidate in acceptable:
        candidate = candidate.lower()
        if candidate == here or candidate == REMOTE:
            return 100
    return 0


def calculate_capacity_match(capacity: int, required: int) -> int:
    """Full score when capacity covers the requirement, proportional otherwise."""
    if required == 0:
        return 100
    if capacity >= required:
        return 100
    return round_score((capacity / required) * 100)
