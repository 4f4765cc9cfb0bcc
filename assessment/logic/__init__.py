"""
Assessment Logic Module

Provides the deterministic status engine for school infrastructure health.
"""

from .constants import (
    Status,
    Condition,
    OperationalStatus,
    WaterReliability,
    RiskCategory,
)
from .contracts import (
    School,
    Hostel,
    Classroom,
    WaterSource,
    PowerSource,
    TeacherSummary,
    Equipment,
    ComputerLab,
    Facility,
    RiskFlag,
    NationalAggregates,
    SchoolAssessment,
    AssessmentOutput,
)
from .combinator import combine_worst
from .domain_classifiers import (
    classify_hostel,
    classify_classroom,
    classify_water,
    classify_power,
    classify_teacher_staffing,
    classify_equipment,
    classify_computer_labs,
    classify_facilities,
    classify_boarding_occupancy,
)
from .aggregator import classify_school, assess_school, total_boarding_capacity
from .risk_flags import generate_risk_flags
from .national import aggregate_national, group_urgent_risks
from .engine import AssessmentEngine, assess_schools

__all__ = [
    # Main engine
    "AssessmentEngine",
    "assess_schools",

    # Rules
    "combine_worst",
    "classify_hostel",
    "classify_classroom",
    "classify_water",
    "classify_power",
    "classify_teacher_staffing",
    "classify_equipment",
    "classify_computer_labs",
    "classify_facilities",
    "classify_boarding_occupancy",
    "classify_school",
    "assess_school",
    "total_boarding_capacity",
    "generate_risk_flags",
    "aggregate_national",
    "group_urgent_risks",

    # Contracts
    "School",
    "Hostel",
    "Classroom",
    "WaterSource",
    "PowerSource",
    "TeacherSummary",
    "Equipment",
    "ComputerLab",
    "Facility",
    "RiskFlag",
    "NationalAggregates",
    "SchoolAssessment",
    "AssessmentOutput",

    # Enums
    "Status",
    "Condition",
    "OperationalStatus",
    "WaterReliability",
    "RiskCategory",
]
