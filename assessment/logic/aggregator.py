"""
School Aggregator

Combines every domain classifier for one school into an overall status
and a per-domain breakdown.
"""

from typing import List
from .contracts import School, SchoolAssessment
from .constants import Status
from .combinator import combine_worst
from .domain_classifiers import (
    classify_hostels,
    classify_classrooms,
    classify_water,
    classify_power,
    classify_teacher_staffing,
    classify_equipment,
    classify_computer_labs,
    classify_facilities,
    classify_boarding_occupancy,
    boarding_totals,
)
from .risk_flags import generate_risk_flags


def total_boarding_capacity(school: School) -> int:
    """Sum of beds across the school's hostels."""
    return sum(hostel.total_beds for hostel in school.hostels)


def collect_statuses(school: School) -> List[Status]:
    """
    Every status that feeds the school roll-up.

    Individual hostel and classroom statuses are included one by one,
    followed by each set status and the school-wide boarding occupancy.
    """
    return [
        *classify_hostels(school.hostels),
        *classify_classrooms(school.classrooms),
        classify_water(school.water_sources),
        classify_power(school.power_sources),
        classify_teacher_staffing(school.teacher_summary, school.total_students),
        classify_equipment(school.equipment),
        classify_computer_labs(school.computer_labs),
        classify_facilities(school.facilities),
        classify_boarding_occupancy(school.hostels),
    ]


def classify_school(school: School) -> Status:
    """
    Overall status of a school: the worst of all its domain statuses.
    """
    return combine_worst(collect_statuses(school))


def assess_school(school: School) -> SchoolAssessment:
    """
    Classify a school and break the result down per domain.

    Args:
        school: School snapshot

    Returns:
        SchoolAssessment whose status equals classify_school(school)
    """
    per_hostel = classify_hostels(school.hostels)
    per_classroom = classify_classrooms(school.classrooms)
    _, total_occupancy = boarding_totals(school.hostels)

    return SchoolAssessment(
        school_id=school.id,
        school_name=school.name,
        state=school.state,
        total_students=school.total_students,
        status=classify_school(school),
        hostel_status=combine_worst(per_hostel),
        classroom_status=combine_worst(per_classroom),
        water_status=classify_water(school.water_sources),
        power_status=classify_power(school.power_sources),
        staffing_status=classify_teacher_staffing(school.teacher_summary, school.total_students),
        equipment_status=classify_equipment(school.equipment),
        computer_lab_status=classify_computer_labs(school.computer_labs),
        facility_status=classify_facilities(school.facilities),
        boarding_occupancy_status=classify_boarding_occupancy(school.hostels),
        hostel_statuses={h.id: s for h, s in zip(school.hostels, per_hostel)},
        classroom_statuses={c.id: s for c, s in zip(school.classrooms, per_classroom)},
        total_boarding_capacity=total_boarding_capacity(school),
        total_boarding_occupancy=total_occupancy,
        risk_flags=generate_risk_flags(school),
    )
