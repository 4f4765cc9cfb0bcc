"""
Domain Classifiers

Individual classification functions for each infrastructure sub-domain.
Each classifier maps a record (or a homogeneous collection of records)
to a Status. All logic is deterministic - no AI/ML components.
"""

from typing import List, Sequence
from .contracts import (
    Hostel,
    Classroom,
    WaterSource,
    PowerSource,
    TeacherSummary,
    Equipment,
    ComputerLab,
    Facility,
)
from .constants import (
    Status,
    Condition,
    OperationalStatus,
    WaterReliability,
    HOSTEL_OCCUPANCY_RED_PCT,
    HOSTEL_OCCUPANCY_AMBER_PCT,
    CLASSROOM_LOAD_RED_PCT,
    CLASSROOM_LOAD_AMBER_PCT,
    BOARDING_OCCUPANCY_RED_PCT,
    BOARDING_OCCUPANCY_AMBER_PCT,
    POWER_HOURS_RED,
    POWER_HOURS_AMBER,
    STUDENT_TEACHER_RATIO_RED,
    STUDENT_TEACHER_RATIO_AMBER,
    QUALIFIED_PCT_RED,
    QUALIFIED_PCT_AMBER,
    EQUIPMENT_FUNCTIONAL_RED_PCT,
    EQUIPMENT_FUNCTIONAL_AMBER_PCT,
    EQUIPMENT_POOR_RED_PCT,
    EQUIPMENT_POOR_AMBER_PCT,
    COMPUTER_FUNCTIONAL_RED_PCT,
    COMPUTER_FUNCTIONAL_AMBER_PCT,
    FACILITY_CLOSED_RED_PCT,
    FACILITY_CLOSED_AMBER_PCT,
    FACILITY_POOR_RED_PCT,
    FACILITY_POOR_AMBER_PCT,
)


# =============================================================================
# HELPERS
# =============================================================================

def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, treating a zero denominator as a 0 ratio."""
    if denominator > 0:
        return numerator / denominator
    return 0.0


def percentage(part: float, whole: float) -> float:
    """Percentage on a 0-100 scale; 0 when whole is 0."""
    if whole > 0:
        return (part / whole) * 100
    return 0.0


def boarding_totals(hostels: Sequence[Hostel]) -> tuple:
    """Summed (beds, current occupancy) across hostels."""
    total_beds = sum(h.total_beds for h in hostels)
    total_occupancy = sum(h.current_occupancy for h in hostels)
    return total_beds, total_occupancy


def boarding_occupancy_percentage(hostels: Sequence[Hostel]) -> float:
    total_beds, total_occupancy = boarding_totals(hostels)
    return percentage(total_occupancy, total_beds)


def equipment_functional_percentage(equipment: Sequence[Equipment]) -> float:
    total_items = sum(eq.total_count for eq in equipment)
    functional_items = sum(eq.functional_count for eq in equipment)
    return percentage(functional_items, total_items)


def computer_functional_percentage(computer_labs: Sequence[ComputerLab]) -> float:
    total_computers = sum(lab.total_computers for lab in computer_labs)
    functional_computers = sum(lab.functional_computers for lab in computer_labs)
    return percentage(functional_computers, total_computers)


def best_power_source(power_sources: Sequence[PowerSource]) -> PowerSource:
    """
    Operational source with the most hours/day.

    Ties keep the first source encountered. Callers must ensure at least
    one source is operational.
    """
    operational = [ps for ps in power_sources if ps.operational_status]
    best = operational[0]
    for source in operational[1:]:
        if source.average_hours_per_day > best.average_hours_per_day:
            best = source
    return best


# =============================================================================
# PER-RECORD CLASSIFIERS
# =============================================================================

def classify_hostel(hostel: Hostel) -> Status:
    """
    Classify a single hostel.

    Red: Poor condition, occupancy above 120% of beds, or Closed.
    Amber: Fair condition, occupancy above 100% of beds, or Partial.
    A hostel without beds never trips the occupancy branch.
    """
    utilization = hostel.occupancy_ratio * 100

    if (
        hostel.condition == Condition.POOR
        or utilization > HOSTEL_OCCUPANCY_RED_PCT
        or hostel.operational_status == OperationalStatus.CLOSED
    ):
        return Status.RED

    if (
        hostel.condition == Condition.FAIR
        or utilization > HOSTEL_OCCUPANCY_AMBER_PCT
        or hostel.operational_status == OperationalStatus.PARTIAL
    ):
        return Status.AMBER

    return Status.GREEN


def classify_classroom(classroom: Classroom) -> Status:
    """
    Classify a single classroom.

    Red: load above 120% of seating or Poor condition.
    Amber: load above 100%, Fair condition, or inadequate ventilation.
    """
    load = classroom.load_ratio * 100

    if load > CLASSROOM_LOAD_RED_PCT or classroom.condition == Condition.POOR:
        return Status.RED

    if (
        load > CLASSROOM_LOAD_AMBER_PCT
        or classroom.condition == Condition.FAIR
        or not classroom.ventilation_adequacy
    ):
        return Status.AMBER

    return Status.GREEN


def classify_teacher_staffing(teacher_summary: TeacherSummary, total_students: int) -> Status:
    """
    Classify staffing from the student:teacher ratio and the share of
    qualified teachers.

    Args:
        teacher_summary: School's teacher summary
        total_students: School's enrolled students

    Returns:
        Red when ratio > 35 or qualified% < 60,
        Amber when ratio > 30 or qualified% < 75, else Green.
    """
    ratio = safe_ratio(total_students, teacher_summary.total)
    qualified_pct = percentage(teacher_summary.qualified, teacher_summary.total)

    if ratio > STUDENT_TEACHER_RATIO_RED or qualified_pct < QUALIFIED_PCT_RED:
        return Status.RED

    if ratio > STUDENT_TEACHER_RATIO_AMBER or qualified_pct < QUALIFIED_PCT_AMBER:
        return Status.AMBER

    return Status.GREEN


# =============================================================================
# SET CLASSIFIERS
# =============================================================================

def classify_water(water_sources: Sequence[WaterSource]) -> Status:
    """
    Classify the school's water supply.

    Only functional sources count. A constant source is Green; failing
    that an intermittent one is Amber; anything else is Red.
    """
    if not water_sources:
        return Status.RED

    functional = [ws for ws in water_sources if ws.functional_status]
    if not functional:
        return Status.RED

    if any(ws.reliability == WaterReliability.CONSTANT for ws in functional):
        return Status.GREEN

    if any(ws.reliability == WaterReliability.INTERMITTENT for ws in functional):
        return Status.AMBER

    return Status.RED


def classify_power(power_sources: Sequence[PowerSource]) -> Status:
    """
    Classify the school's power supply from its best operational source.

    Red: no operational source, or best source under 6 hours/day with no backup.
    Amber: best source under 12 hours/day, or no backup.
    """
    if not power_sources:
        return Status.RED

    if not any(ps.operational_status for ps in power_sources):
        return Status.RED

    best = best_power_source(power_sources)

    if best.average_hours_per_day < POWER_HOURS_RED and not best.backup_available:
        return Status.RED

    if best.average_hours_per_day < POWER_HOURS_AMBER or not best.backup_available:
        return Status.AMBER

    return Status.GREEN


def classify_equipment(equipment: Sequence[Equipment]) -> Status:
    """
    Classify equipment across all category rows.

    Considers:
    - Overall functional share of items (summed across rows)
    - Share of rows in Poor condition
    """
    if not equipment:
        return Status.RED

    functional_pct = equipment_functional_percentage(equipment)
    poor_rows = sum(1 for eq in equipment if eq.condition == Condition.POOR)
    poor_pct = percentage(poor_rows, len(equipment))

    if functional_pct < EQUIPMENT_FUNCTIONAL_RED_PCT or poor_pct > EQUIPMENT_POOR_RED_PCT:
        return Status.RED

    if functional_pct < EQUIPMENT_FUNCTIONAL_AMBER_PCT or poor_pct > EQUIPMENT_POOR_AMBER_PCT:
        return Status.AMBER

    return Status.GREEN


def classify_computer_labs(computer_labs: Sequence[ComputerLab]) -> Status:
    """
    Classify computer labs.

    Any Poor or Closed lab is Red regardless of the functional share;
    any Partial lab is at least Amber.
    """
    if not computer_labs:
        return Status.RED

    functional_pct = computer_functional_percentage(computer_labs)
    has_poor = any(lab.condition == Condition.POOR for lab in computer_labs)
    has_closed = any(
        lab.operational_status == OperationalStatus.CLOSED for lab in computer_labs
    )

    if functional_pct < COMPUTER_FUNCTIONAL_RED_PCT or has_poor or has_closed:
        return Status.RED

    has_partial = any(
        lab.operational_status == OperationalStatus.PARTIAL for lab in computer_labs
    )
    if functional_pct < COMPUTER_FUNCTIONAL_AMBER_PCT or has_partial:
        return Status.AMBER

    return Status.GREEN


def classify_facilities(facilities: Sequence[Facility]) -> Status:
    """
    Classify physical facilities by closed and poor-condition shares.

    A school with no facilities at all is Amber, not Red.
    """
    if not facilities:
        return Status.AMBER

    closed = sum(1 for f in facilities if f.operational_status == OperationalStatus.CLOSED)
    poor = sum(1 for f in facilities if f.condition == Condition.POOR)
    closed_pct = percentage(closed, len(facilities))
    poor_pct = percentage(poor, len(facilities))

    if closed_pct > FACILITY_CLOSED_RED_PCT or poor_pct > FACILITY_POOR_RED_PCT:
        return Status.RED

    if (
        closed_pct > FACILITY_CLOSED_AMBER_PCT
        or poor_pct > FACILITY_POOR_AMBER_PCT
        or any(f.operational_status == OperationalStatus.PARTIAL for f in facilities)
    ):
        return Status.AMBER

    return Status.GREEN


def classify_boarding_occupancy(hostels: Sequence[Hostel]) -> Status:
    """
    School-wide overcrowding from beds and occupancy summed over all hostels.

    Runs independently of each hostel's own occupancy check.
    """
    utilization = boarding_occupancy_percentage(hostels)

    if utilization > BOARDING_OCCUPANCY_RED_PCT:
        return Status.RED
    if utilization > BOARDING_OCCUPANCY_AMBER_PCT:
        return Status.AMBER
    return Status.GREEN


def classify_hostels(hostels: Sequence[Hostel]) -> List[Status]:
    return [classify_hostel(h) for h in hostels]


def classify_classrooms(classrooms: Sequence[Classroom]) -> List[Status]:
    return [classify_classroom(c) for c in classrooms]
