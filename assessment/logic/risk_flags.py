"""
Risk Flag Generator

Turns every non-Green sub-domain signal of a school into a RiskFlag.
Nine independent checks, each raising at most one flag; a flag's
severity is the sub-domain's own status, never the school's overall one.
"""

from typing import List
from .contracts import School, RiskFlag
from .constants import Status, RiskCategory, Condition, OperationalStatus
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
    boarding_occupancy_percentage,
    equipment_functional_percentage,
    computer_functional_percentage,
    safe_ratio,
    percentage,
)
from utils.formatting import format_percent, format_ratio


def _flag(category: RiskCategory, severity: Status, description: str, **figures: float) -> RiskFlag:
    return RiskFlag(
        category=category,
        severity=severity,
        description=description,
        active=True,
        figures=figures,
    )


def _hostel_flag(school: School) -> List[RiskFlag]:
    status = combine_worst(classify_hostels(school.hostels))
    if status == Status.GREEN:
        return []
    severity_word = "Critical" if status == Status.RED else "Moderate"
    return [_flag(
        RiskCategory.INFRASTRUCTURE,
        status,
        f"Hostel infrastructure issues: {severity_word} condition or capacity problems",
    )]


def _classroom_flag(school: School) -> List[RiskFlag]:
    status = combine_worst(classify_classrooms(school.classrooms))
    if status == Status.GREEN:
        return []
    detail = "Severe overcrowding" if status == Status.RED else "Overcrowding or condition concerns"
    return [_flag(RiskCategory.INFRASTRUCTURE, status, f"Classroom issues: {detail}")]


def _water_flag(school: School) -> List[RiskFlag]:
    status = classify_water(school.water_sources)
    if status == Status.GREEN:
        return []
    description = (
        "No reliable water source functional"
        if status == Status.RED
        else "Intermittent water supply"
    )
    return [_flag(RiskCategory.WATER, status, description)]


def _power_flag(school: School) -> List[RiskFlag]:
    status = classify_power(school.power_sources)
    if status == Status.GREEN:
        return []
    description = (
        "Insufficient power availability (<6hrs/day without backup)"
        if status == Status.RED
        else "Limited power availability or no backup"
    )
    return [_flag(RiskCategory.POWER, status, description)]


def _overcrowding_flag(school: School) -> List[RiskFlag]:
    status = classify_boarding_occupancy(school.hostels)
    if status == Status.GREEN:
        return []
    utilization = boarding_occupancy_percentage(school.hostels)
    prefix = "Severe overcrowding" if status == Status.RED else "Overcrowding"
    return [_flag(
        RiskCategory.OVERCROWDING,
        status,
        f"{prefix}: {format_percent(utilization)} capacity utilization",
        utilization_pct=utilization,
    )]


def _staffing_flag(school: School) -> List[RiskFlag]:
    summary = school.teacher_summary
    status = classify_teacher_staffing(summary, school.total_students)
    if status == Status.GREEN:
        return []
    ratio = safe_ratio(school.total_students, summary.total)
    qualified_pct = percentage(summary.qualified, summary.total)
    prefix = "Critical teacher shortage" if status == Status.RED else "Teacher shortage"
    return [_flag(
        RiskCategory.SERVICES,
        status,
        f"{prefix}: {format_ratio(ratio)} ratio or {format_percent(qualified_pct)} qualified",
        student_teacher_ratio=ratio,
        qualified_pct=qualified_pct,
    )]


def _equipment_flag(school: School) -> List[RiskFlag]:
    status = classify_equipment(school.equipment)
    if status == Status.GREEN:
        return []
    functional_pct = equipment_functional_percentage(school.equipment)
    prefix = "Critical equipment failure" if status == Status.RED else "Equipment issues"
    return [_flag(
        RiskCategory.SERVICES,
        status,
        f"{prefix}: {format_percent(functional_pct)} functional",
        functional_pct=functional_pct,
    )]


def _computer_lab_flag(school: School) -> List[RiskFlag]:
    status = classify_computer_labs(school.computer_labs)
    if status == Status.GREEN:
        return []
    functional_pct = computer_functional_percentage(school.computer_labs)
    prefix = "Critical computer lab issues" if status == Status.RED else "Computer lab issues"
    return [_flag(
        RiskCategory.SERVICES,
        status,
        f"{prefix}: {format_percent(functional_pct)} functional",
        functional_pct=functional_pct,
    )]


def _facility_flag(school: School) -> List[RiskFlag]:
    status = classify_facilities(school.facilities)
    if status == Status.GREEN:
        return []
    closed = sum(1 for f in school.facilities if f.operational_status == OperationalStatus.CLOSED)
    poor = sum(1 for f in school.facilities if f.condition == Condition.POOR)
    prefix = "Critical facility issues" if status == Status.RED else "Facility concerns"
    return [_flag(
        RiskCategory.FACILITIES,
        status,
        f"{prefix}: {closed} closed, {poor} in poor condition",
        closed_count=closed,
        poor_count=poor,
    )]


# Order in which flags are emitted
FLAG_CHECKS = [
    _hostel_flag,
    _classroom_flag,
    _water_flag,
    _power_flag,
    _overcrowding_flag,
    _staffing_flag,
    _equipment_flag,
    _computer_lab_flag,
    _facility_flag,
]


def generate_risk_flags(school: School) -> List[RiskFlag]:
    """
    Generate the active risk flags for one school.

    Args:
        school: School snapshot

    Returns:
        Zero to nine RiskFlags, each Amber or Red. Hostel and classroom
        issues are both tagged Infrastructure, so a school may carry two
        Infrastructure flags.
    """
    flags: List[RiskFlag] = []
    for check in FLAG_CHECKS:
        flags.extend(check(school))
    return flags
