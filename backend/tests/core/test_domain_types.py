"""Domain Types — stored values of the closed vocabularies."""

from herdbook.core.domain_types import (
    ApprovalStatus, FeedType, ItemType, VaccinationStatus, YesNo,
)


def test_yes_no_stored_as_single_letter():
    assert YesNo.YES.value == "Y"
    assert YesNo.NO.value == "N"


def test_approval_status_codes():
    assert [s.value for s in ApprovalStatus] == ["P", "A", "R"]


def test_str_enums_compare_to_stored_values():
    assert ItemType.CALF_FEED == "CALF_FEED"
    assert FeedType("Green Fodder") is FeedType.GREEN_FODDER


def test_vaccination_status_labels():
    assert {s.value for s in VaccinationStatus} == {"Scheduled", "Due Soon", "Overdue"}
