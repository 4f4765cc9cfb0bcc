"""
Data Contracts for the Assessment Engine

Defines Pydantic models for the institution snapshot (input) and the
classification results (output). These contracts are the API boundary
for the status engine.
"""

from datetime import date
from typing import List, Optional, Dict
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .constants import (
    Status,
    Condition,
    OperationalStatus,
    WaterReliability,
    RiskCategory,
    HostelType,
    ConstructionType,
    WaterSourceType,
    PowerSourceType,
    EquipmentCategory,
    FacilityType,
    ENGINE_VERSION,
)


class Record(BaseModel):
    """
    Base for snapshot records. Records are read-only once loaded and
    accept either camelCase (totalStudents) or snake_case field names.
    """

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class HostelBlock(Record):
    id: str
    hostel_id: str = ""
    name: str = ""
    floors: int = 0
    rooms_per_floor: int = 0
    condition: Condition = Condition.GOOD
    fire_safety: bool = True


class Hostel(Record):
    """Boarding house belonging to one school."""
    id: str
    school_id: str = ""
    name: str = ""
    type: HostelType = HostelType.MIXED
    construction_type: Optional[ConstructionType] = None
    year_built: Optional[int] = None
    condition: Condition
    operational_status: OperationalStatus
    total_rooms: int = 0
    total_beds: int
    current_occupancy: int
    blocks: List[HostelBlock] = Field(default_factory=list)

    @property
    def occupancy_ratio(self) -> float:
        """Occupancy / beds, 0 when the hostel has no beds."""
        if self.total_beds > 0:
            return self.current_occupancy / self.total_beds
        return 0.0


class Classroom(Record):
    id: str
    school_id: str = ""
    academic_block_name: str = ""
    seating_capacity: int
    current_students: int
    construction_type: Optional[ConstructionType] = None
    ventilation_adequacy: bool
    condition: Condition

    @property
    def load_ratio(self) -> float:
        """Students / seating capacity, 0 when capacity is 0."""
        if self.seating_capacity > 0:
            return self.current_students / self.seating_capacity
        return 0.0


class WaterSource(Record):
    id: str
    school_id: str = ""
    source_type: Optional[WaterSourceType] = None
    capacity: float = 0.0  # litres/day
    functional_status: bool
    reliability: WaterReliability
    last_maintenance_date: Optional[date] = None


class PowerSource(Record):
    id: str
    school_id: str = ""
    source_type: Optional[PowerSourceType] = None
    capacity: float = 0.0  # kW
    average_hours_per_day: float
    operational_status: bool
    backup_available: bool


class QualificationBreakdown(Record):
    b_ed: int = 0
    m_ed: int = 0
    phd: int = 0
    other: int = 0


class SubjectAreaBreakdown(Record):
    science: int = 0
    arts: int = 0
    commercial: int = 0
    technical: int = 0
    languages: int = 0
    mathematics: int = 0
    social_studies: int = 0
    physical_education: int = 0


class TeacherSummary(Record):
    """
    Staffing summary, one per school.
    Only total and qualified feed classification; breakdowns are informational.
    """
    total: int
    qualified: int
    by_qualification: QualificationBreakdown = Field(default_factory=QualificationBreakdown)
    by_subject_area: SubjectAreaBreakdown = Field(default_factory=SubjectAreaBreakdown)


class Equipment(Record):
    """One row per equipment category."""
    id: str
    school_id: str = ""
    category: EquipmentCategory
    total_count: int
    functional_count: int
    condition: Condition


class ComputerLab(Record):
    id: str
    school_id: str = ""
    name: str = ""
    total_computers: int
    functional_computers: int
    last_maintenance_date: Optional[date] = None
    condition: Condition
    operational_status: OperationalStatus


class Facility(Record):
    id: str
    school_id: str = ""
    type: FacilityType
    name: str = ""
    capacity: int = 0
    current_usage: int = 0
    condition: Condition
    operational_status: OperationalStatus
    equipment_count: Optional[int] = None


class School(Record):
    """
    Aggregate root for one institution.
    Owns every facility collection and exactly one TeacherSummary.
    """
    id: str
    name: str
    state: str = ""
    total_students: int
    total_staff: int = 0
    notes: str = ""

    hostels: List[Hostel] = Field(default_factory=list)
    classrooms: List[Classroom] = Field(default_factory=list)
    water_sources: List[WaterSource] = Field(default_factory=list)
    power_sources: List[PowerSource] = Field(default_factory=list)
    teacher_summary: TeacherSummary
    equipment: List[Equipment] = Field(default_factory=list)
    computer_labs: List[ComputerLab] = Field(default_factory=list)
    facilities: List[Facility] = Field(default_factory=list)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class RiskFlag(Record):
    """
    Active concern raised for one school.
    Severity is always Amber or Red; figures carries the raw numbers
    embedded in the description.
    """
    category: RiskCategory
    severity: Status
    description: str
    active: bool = True
    figures: Dict[str, float] = Field(default_factory=dict)


class NationalAggregates(BaseModel):
    total_schools: int = 0
    total_students: int = 0
    schools_by_status: Dict[Status, int] = Field(
        default_factory=lambda: {status: 0 for status in Status}
    )


class SchoolAssessment(BaseModel):
    """
    Full classification of one school with per-domain breakdown.
    """
    # Identity
    school_id: str
    school_name: str
    state: str = ""
    total_students: int = 0

    # Overall
    status: Status

    # Domain statuses
    hostel_status: Status
    classroom_status: Status
    water_status: Status
    power_status: Status
    staffing_status: Status
    equipment_status: Status
    computer_lab_status: Status
    facility_status: Status
    boarding_occupancy_status: Status

    # Per-record statuses (record id -> status)
    hostel_statuses: Dict[str, Status] = Field(default_factory=dict)
    classroom_statuses: Dict[str, Status] = Field(default_factory=dict)

    # Boarding figures
    total_boarding_capacity: int = 0
    total_boarding_occupancy: int = 0

    # Risk & Explainability
    risk_flags: List[RiskFlag] = Field(default_factory=list)


class AssessmentOutput(BaseModel):
    """
    Output contract for a full snapshot run.
    """
    assessments: List[SchoolAssessment] = Field(default_factory=list)
    national: NationalAggregates = Field(default_factory=NationalAggregates)

    # Processing metadata
    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION

    # Warnings/Notes
    warnings: List[str] = Field(default_factory=list)
