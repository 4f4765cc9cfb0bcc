"""
Tests for the per-domain classifiers.

Thresholds are checked on both sides of every boundary; comparisons are
strict unless noted.
"""

import pytest

from assessment.logic.constants import (
    Status,
    Condition,
    OperationalStatus,
    WaterReliability,
)
from assessment.logic.domain_classifiers import (
    classify_hostel,
    classify_classroom,
    classify_water,
    classify_power,
    classify_teacher_staffing,
    classify_equipment,
    classify_computer_labs,
    classify_facilities,
    classify_boarding_occupancy,
    best_power_source,
    safe_ratio,
    percentage,
)
from assessment.tests.factories import (
    make_hostel,
    make_classroom,
    make_water,
    make_power,
    make_teachers,
    make_equipment,
    make_lab,
    make_facility,
)


# =============================================================================
# HELPERS
# =============================================================================

def test_zero_denominators_are_zero():
    assert safe_ratio(10, 0) == 0.0
    assert percentage(10, 0) == 0.0
    assert percentage(1, 4) == 25.0


# =============================================================================
# HOSTEL
# =============================================================================

def test_hostel_green():
    assert classify_hostel(make_hostel()) == Status.GREEN


@pytest.mark.parametrize("occupancy, expected", [
    (100, Status.GREEN),   # exactly 100%
    (101, Status.AMBER),
    (120, Status.AMBER),   # exactly 120%
    (121, Status.RED),
])
def test_hostel_occupancy_thresholds(occupancy, expected):
    hostel = make_hostel(total_beds=100, current_occupancy=occupancy)
    assert classify_hostel(hostel) == expected


def test_hostel_condition_and_operational_status():
    assert classify_hostel(make_hostel(condition=Condition.POOR)) == Status.RED
    assert classify_hostel(make_hostel(condition=Condition.FAIR)) == Status.AMBER
    assert classify_hostel(make_hostel(operational_status=OperationalStatus.CLOSED)) == Status.RED
    assert classify_hostel(make_hostel(operational_status=OperationalStatus.PARTIAL)) == Status.AMBER


def test_hostel_without_beds_ignores_occupancy():
    assert classify_hostel(make_hostel(total_beds=0, current_occupancy=500)) == Status.GREEN
    assert classify_hostel(make_hostel(total_beds=0, current_occupancy=500,
                                       condition=Condition.FAIR)) == Status.AMBER
    assert classify_hostel(make_hostel(total_beds=0, current_occupancy=500,
                                       operational_status=OperationalStatus.CLOSED)) == Status.RED


def test_hostel_occupancy_ratio_property():
    assert make_hostel(total_beds=200, current_occupancy=150).occupancy_ratio == 0.75
    assert make_hostel(total_beds=0, current_occupancy=10).occupancy_ratio == 0.0


@pytest.mark.parametrize("beds, occupancy, expected", [
    (200, 240, Status.AMBER),  # ratio 1.2
    (200, 242, Status.RED),
    (0, 999, Status.GREEN),    # ratio 0
])
def test_hostel_status_follows_occupancy_ratio(beds, occupancy, expected):
    hostel = make_hostel(total_beds=beds, current_occupancy=occupancy)
    assert classify_hostel(hostel) == expected


# =============================================================================
# CLASSROOM
# =============================================================================

@pytest.mark.parametrize("students, expected", [
    (40, Status.GREEN),
    (41, Status.AMBER),
    (48, Status.AMBER),   # exactly 120%
    (49, Status.RED),
])
def test_classroom_load_thresholds(students, expected):
    classroom = make_classroom(seating_capacity=40, current_students=students)
    assert classify_classroom(classroom) == expected


def test_classroom_condition_and_ventilation():
    assert classify_classroom(make_classroom(condition=Condition.POOR)) == Status.RED
    assert classify_classroom(make_classroom(condition=Condition.FAIR)) == Status.AMBER
    assert classify_classroom(make_classroom(ventilation_adequacy=False)) == Status.AMBER


def test_classroom_without_capacity_is_not_overcrowded():
    classroom = make_classroom(seating_capacity=0, current_students=30)
    assert classroom.load_ratio == 0.0
    assert classify_classroom(classroom) == Status.GREEN

    full = make_classroom(seating_capacity=50, current_students=60)
    assert full.load_ratio == 1.2
    assert classify_classroom(full) == Status.AMBER


# =============================================================================
# WATER
# =============================================================================

def test_water_no_sources_is_red():
    assert classify_water([]) == Status.RED


def test_water_counts_only_functional_sources():
    broken = [make_water(id=f"w{i}", functional_status=False) for i in range(9)]
    working = make_water(id="w-ok", reliability=WaterReliability.CONSTANT)
    assert classify_water(broken + [working]) == Status.GREEN
    assert classify_water(broken) == Status.RED


def test_water_intermittent_is_amber():
    sources = [
        make_water(id="w1", reliability=WaterReliability.INTERMITTENT),
        make_water(id="w2", reliability=WaterReliability.CONSTANT, functional_status=False),
    ]
    assert classify_water(sources) == Status.AMBER


def test_water_functional_but_unreliable_is_red():
    assert classify_water([make_water(reliability=WaterReliability.NONE)]) == Status.RED


# =============================================================================
# POWER
# =============================================================================

def test_power_no_sources_or_none_operational_is_red():
    assert classify_power([]) == Status.RED
    assert classify_power([make_power(operational_status=False)]) == Status.RED


def test_power_six_hours_is_not_red():
    assert classify_power([make_power(average_hours_per_day=6.0, backup_available=False)]) == Status.AMBER
    assert classify_power([make_power(average_hours_per_day=6.0, backup_available=True)]) == Status.AMBER


def test_power_under_six_hours():
    assert classify_power([make_power(average_hours_per_day=5.9, backup_available=False)]) == Status.RED
    assert classify_power([make_power(average_hours_per_day=5.9, backup_available=True)]) == Status.AMBER


def test_power_twelve_hours_with_backup_is_green():
    assert classify_power([make_power(average_hours_per_day=12.0, backup_available=True)]) == Status.GREEN
    assert classify_power([make_power(average_hours_per_day=12.0, backup_available=False)]) == Status.AMBER


def test_power_uses_best_operational_source():
    sources = [
        make_power(id="p1", average_hours_per_day=4.0, backup_available=False),
        make_power(id="p2", average_hours_per_day=20.0, backup_available=True),
        make_power(id="p3", average_hours_per_day=24.0, operational_status=False, backup_available=False),
    ]
    assert best_power_source(sources).id == "p2"
    assert classify_power(sources) == Status.GREEN


# =============================================================================
# TEACHER STAFFING
# =============================================================================

@pytest.mark.parametrize("students, expected", [
    (1200, Status.GREEN),  # ratio 30
    (1240, Status.AMBER),  # ratio 31
    (1400, Status.AMBER),  # ratio 35
    (1440, Status.RED),    # ratio 36
])
def test_staffing_ratio_thresholds(students, expected):
    assert classify_teacher_staffing(make_teachers(total=40, qualified=40), students) == expected


@pytest.mark.parametrize("qualified, expected", [
    (30, Status.GREEN),  # 75%
    (29, Status.AMBER),
    (24, Status.AMBER),  # 60%
    (23, Status.RED),
])
def test_staffing_qualification_thresholds(qualified, expected):
    assert classify_teacher_staffing(make_teachers(total=40, qualified=qualified), 800) == expected


def test_qualification_dominates_good_ratio():
    # ratio 25 is fine, but 55% qualified is Red
    assert classify_teacher_staffing(make_teachers(total=40, qualified=22), 1000) == Status.RED


def test_staffing_without_teachers_is_red():
    assert classify_teacher_staffing(make_teachers(total=0, qualified=0), 500) == Status.RED


# =============================================================================
# EQUIPMENT
# =============================================================================

def test_equipment_empty_is_red():
    assert classify_equipment([]) == Status.RED


@pytest.mark.parametrize("functional, expected", [
    (80, Status.GREEN),
    (79, Status.AMBER),
    (60, Status.AMBER),
    (59, Status.RED),
])
def test_equipment_functional_thresholds(functional, expected):
    rows = [make_equipment(total_count=100, functional_count=functional)]
    assert classify_equipment(rows) == expected


def test_equipment_functional_share_is_summed_across_rows():
    rows = [
        make_equipment(id="e1", total_count=10, functional_count=0),
        make_equipment(id="e2", total_count=90, functional_count=90),
    ]
    assert classify_equipment(rows) == Status.GREEN


def test_equipment_poor_rows():
    def rows(poor, total):
        return [
            make_equipment(id=f"e{i}", condition=Condition.POOR if i < poor else Condition.GOOD)
            for i in range(total)
        ]
    assert classify_equipment(rows(3, 10)) == Status.GREEN   # 30%
    assert classify_equipment(rows(4, 10)) == Status.AMBER   # 40%
    assert classify_equipment(rows(5, 10)) == Status.AMBER   # 50%
    assert classify_equipment(rows(6, 10)) == Status.RED     # 60%


def test_equipment_rows_with_zero_items_are_zero_percent():
    assert classify_equipment([make_equipment(total_count=0, functional_count=0)]) == Status.RED


# =============================================================================
# COMPUTER LABS
# =============================================================================

def test_computer_labs_empty_is_red():
    assert classify_computer_labs([]) == Status.RED


@pytest.mark.parametrize("functional, expected", [
    (75, Status.GREEN),
    (74, Status.AMBER),
    (50, Status.AMBER),
    (49, Status.RED),
])
def test_computer_lab_functional_thresholds(functional, expected):
    labs = [make_lab(total_computers=100, functional_computers=functional)]
    assert classify_computer_labs(labs) == expected


def test_any_poor_or_closed_lab_is_red():
    assert classify_computer_labs([make_lab(id="l1"), make_lab(id="l2", condition=Condition.POOR)]) == Status.RED
    assert classify_computer_labs([
        make_lab(id="l1"),
        make_lab(id="l2", operational_status=OperationalStatus.CLOSED),
    ]) == Status.RED


def test_any_partial_lab_is_amber():
    labs = [make_lab(id="l1"), make_lab(id="l2", operational_status=OperationalStatus.PARTIAL)]
    assert classify_computer_labs(labs) == Status.AMBER


# =============================================================================
# FACILITIES
# =============================================================================

def test_facilities_empty_is_amber():
    assert classify_facilities([]) == Status.AMBER


def _facilities(closed=0, poor=0, partial=0, total=10):
    result = []
    for i in range(total):
        status = OperationalStatus.FUNCTIONAL
        if i < closed:
            status = OperationalStatus.CLOSED
        elif i < closed + partial:
            status = OperationalStatus.PARTIAL
        condition = Condition.POOR if i >= total - poor else Condition.GOOD
        result.append(make_facility(id=f"f{i}", operational_status=status, condition=condition))
    return result


@pytest.mark.parametrize("closed, expected", [
    (2, Status.GREEN),  # 20%
    (3, Status.AMBER),
    (4, Status.AMBER),  # 40%
    (5, Status.RED),
])
def test_facility_closed_thresholds(closed, expected):
    assert classify_facilities(_facilities(closed=closed)) == expected


@pytest.mark.parametrize("poor, expected", [
    (3, Status.GREEN),  # 30%
    (4, Status.AMBER),
    (5, Status.AMBER),  # 50%
    (6, Status.RED),
])
def test_facility_poor_thresholds(poor, expected):
    assert classify_facilities(_facilities(poor=poor)) == expected


def test_any_partial_facility_is_amber():
    assert classify_facilities(_facilities(partial=1)) == Status.AMBER


# =============================================================================
# BOARDING OCCUPANCY
# =============================================================================

def test_boarding_occupancy_sums_all_hostels():
    # A bedless hostel never trips its own occupancy check but its
    # occupants still count toward the school total
    hostels = [
        make_hostel(id="h1", total_beds=100, current_occupancy=100),
        make_hostel(id="h2", total_beds=0, current_occupancy=30),
    ]
    assert [classify_hostel(h) for h in hostels] == [Status.GREEN, Status.GREEN]
    assert classify_boarding_occupancy(hostels) == Status.RED


def test_boarding_occupancy_can_be_green_when_one_hostel_is_overfull():
    hostels = [
        make_hostel(id="h1", total_beds=100, current_occupancy=150),
        make_hostel(id="h2", total_beds=200, current_occupancy=100),
    ]
    assert classify_hostel(hostels[0]) == Status.RED
    assert classify_boarding_occupancy(hostels) == Status.GREEN


def test_boarding_occupancy_without_hostels_is_green():
    assert classify_boarding_occupancy([]) == Status.GREEN


def test_boarding_occupancy_amber_band():
    hostels = [make_hostel(total_beds=200, current_occupancy=210)]
    assert classify_boarding_occupancy(hostels) == Status.AMBER
