"""Tests for license, location and capacity matching."""

from staffing_service.matching.constraints import (
    calculate_capacity_match,
    calculate_license_match,
    calculate_location_match,
)
from staffing_service.models import License


def test_license_match_requires_validated_license():
    licenses = [
        License(id="lic001", name="AWS Developer", validation_status=True),
        License(id="lic002", name="Scrum Master", validation_status=False),
    ]

    assert calculate_license_match(licenses, ["lic001"]) == 100
    assert calculate_license_match(licenses, ["lic002"]) == 0
    assert calculate_license_match(licenses, ["lic001", "lic002"]) == 50
    assert calculate_license_match(licenses, ["lic001", "lic002", "lic003"]) == 33


def test_license_match_without_requirements():
    assert calculate_license_match([], []) == 100


def test_location_match():
    assert calculate_location_match("Seattle", ["seattle"]) == 100
    assert calculate_location_match("Boston", ["Seattle", "Chicago"]) == 0
    assert calculate_location_match("Boston", []) == 100


def test_remote_accepts_any_location():
    assert calculate_location_match("Boston", ["Seattle", "Remote"]) == 100


def test_capacity_match():
    assert calculate_capacity_match(85, 80) == 100
    assert calculate_capacity_match(40, 80) == 50
    assert calculate_capacity_match(0, 80) == 0
    assert calculate_capacity_match(0, 0) == 100
