"""
Assessment Engine Constants

Defines all enums, thresholds and severity orderings used by the status engine.
All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict

# =============================================================================
# STATUS
# =============================================================================

class Status(str, Enum):
    """Three-level health classification."""
    GREEN = "green"   # Fine
    AMBER = "amber"   # Needs attention
    RED = "red"       # Urgent


# Severity ordering used by every roll-up (Red > Amber > Green)
STATUS_SEVERITY: Dict[Status, int] = {
    Status.GREEN: 0,
    Status.AMBER: 1,
    Status.RED: 2,
}

# =============================================================================
# RECORD ENUMS
# =============================================================================

class Condition(str, Enum):
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class OperationalStatus(str, Enum):
    FUNCTIONAL = "functional"
    PARTIAL = "partial"
    CLOSED = "closed"


class WaterReliability(str, Enum):
    CONSTANT = "constant"
    INTERMITTENT = "intermittent"
    NONE = "none"


class RiskCategory(str, Enum):
    """Categories a risk flag can be raised under."""
    INFRASTRUCTURE = "infrastructure"
    WATER = "water"
    POWER = "power"
    OVERCROWDING = "overcrowding"
    SERVICES = "services"
    FACILITIES = "facilities"


# Informational enums (carried on records, never used in classification)

class HostelType(str, Enum):
    MALE = "male"
    FEMALE = "female"
    MIXED = "mixed"


class ConstructionType(str, Enum):
    CONCRETE = "concrete"
    BLOCK = "block"
    PREFAB = "prefab"


class WaterSourceType(str, Enum):
    BOREHOLE = "borehole"
    PIPE = "pipe"
    WELL = "well"


class PowerSourceType(str, Enum):
    GRID = "grid"
    GENERATOR = "generator"
    SOLAR = "solar"


class EquipmentCategory(str, Enum):
    COMPUTERS = "computers"
    LAB_EQUIPMENT = "lab_equipment"
    SPORTS_EQUIPMENT = "sports_equipment"
    FURNITURE = "furniture"
    LIBRARY_BOOKS = "library_books"
    AUDIO_VISUAL = "audio_visual"
    OTHER = "other"


class FacilityType(str, Enum):
    SCIENCE_LAB = "science_lab"
    COMPUTER_LAB = "computer_lab"
    LIBRARY = "library"
    SPORTS_CENTER = "sports_center"
    STAFF_QUARTERS = "staff_quarters"
    AUDITORIUM = "auditorium"
    CAFETERIA = "cafeteria"
    CLINIC = "clinic"
    WORKSHOP = "workshop"

# =============================================================================
# CLASSIFICATION THRESHOLDS
# =============================================================================
# Percentages are on a 0-100 scale. Comparisons are strict unless noted.

# Hostel occupancy (occupancy / beds)
HOSTEL_OCCUPANCY_RED_PCT = 120.0
HOSTEL_OCCUPANCY_AMBER_PCT = 100.0

# Classroom load (students / seating capacity)
CLASSROOM_LOAD_RED_PCT = 120.0
CLASSROOM_LOAD_AMBER_PCT = 100.0

# School-wide boarding occupancy (summed across hostels)
BOARDING_OCCUPANCY_RED_PCT = 120.0
BOARDING_OCCUPANCY_AMBER_PCT = 100.0

# Power: hours/day of the best operational source
POWER_HOURS_RED = 6.0      # "< 6" and no backup
POWER_HOURS_AMBER = 12.0   # "< 12"

# Teacher staffing
STUDENT_TEACHER_RATIO_RED = 35.0     # ratio > 35
STUDENT_TEACHER_RATIO_AMBER = 30.0   # ratio > 30
QUALIFIED_PCT_RED = 60.0             # qualified% < 60
QUALIFIED_PCT_AMBER = 75.0           # qualified% < 75

# Equipment
EQUIPMENT_FUNCTIONAL_RED_PCT = 60.0   # functional% < 60
EQUIPMENT_FUNCTIONAL_AMBER_PCT = 80.0 # functional% < 80
EQUIPMENT_POOR_RED_PCT = 50.0         # poor rows% > 50
EQUIPMENT_POOR_AMBER_PCT = 30.0       # poor rows% > 30

# Computer labs
COMPUTER_FUNCTIONAL_RED_PCT = 50.0    # functional% < 50
COMPUTER_FUNCTIONAL_AMBER_PCT = 75.0  # functional% < 75

# Facilities
FACILITY_CLOSED_RED_PCT = 40.0    # closed% > 40
FACILITY_CLOSED_AMBER_PCT = 20.0  # closed% > 20
FACILITY_POOR_RED_PCT = 50.0      # poor% > 50
FACILITY_POOR_AMBER_PCT = 30.0    # poor% > 30

# =============================================================================
# ENGINE METADATA
# =============================================================================

ENGINE_VERSION = "1.0.0"
