"""
National Aggregator

Reduces a collection of schools into summary counts.
"""

from typing import Dict, List, Sequence
from .contracts import School, NationalAggregates
from .constants import Status, RiskCategory
from .aggregator import classify_school
from .risk_flags import generate_risk_flags


def aggregate_national(schools: Sequence[School]) -> NationalAggregates:
    """
    Count schools, sum their students and bucket them by overall status.

    green + amber + red always equals the number of schools.
    """
    schools_by_status = {status: 0 for status in Status}
    for school in schools:
        schools_by_status[classify_school(school)] += 1

    return NationalAggregates(
        total_schools=len(schools),
        total_students=sum(school.total_students for school in schools),
        schools_by_status=schools_by_status,
    )


def group_urgent_risks(schools: Sequence[School]) -> Dict[RiskCategory, List[str]]:
    """
    Group schools with Red flags by risk category.

    Each school appears at most once per category; categories without
    any urgent school are omitted. Input order is preserved.
    """
    grouped: Dict[RiskCategory, List[str]] = {}
    for school in schools:
        for flag in generate_risk_flags(school):
            if not flag.active or flag.severity != Status.RED:
                continue
            school_ids = grouped.setdefault(flag.category, [])
            if school.id not in school_ids:
                school_ids.append(school.id)

    # Keep the enum's declared category order
    return {category: grouped[category] for category in RiskCategory if category in grouped}
