"""
Assessment Engine

Main orchestrator that runs every classifier over a snapshot of schools.
This is the primary entry point for producing a full assessment.
"""

import logging
import time
from typing import List, Sequence

from .contracts import School, SchoolAssessment, AssessmentOutput
from .aggregator import assess_school
from .national import aggregate_national
from .constants import Status, ENGINE_VERSION

logger = logging.getLogger(__name__)


class AssessmentEngine:
    """
    Runs the status pipeline over a collection of schools.

    Pipeline flow:
    1. Domain Classification - Classify each sub-domain independently
    2. Roll-Up - Collapse domain statuses into one school status
    3. Risk Flags - Raise a flag for every non-Green sub-domain
    4. National Aggregation - Count schools by status and total students
    """

    def __init__(self):
        self.version = ENGINE_VERSION

    def assess_one(self, school: School) -> SchoolAssessment:
        return assess_school(school)

    def assess(self, schools: Sequence[School]) -> AssessmentOutput:
        """
        Assess every school in the snapshot.

        Args:
            schools: Snapshot of schools

        Returns:
            AssessmentOutput with one SchoolAssessment per school, in input order
        """
        start_time = time.perf_counter()
        logger.info(f"🚀 Starting assessment for {len(schools)} schools")

        if not schools:
            logger.warning("⚠️ No schools supplied to assessment")
            return AssessmentOutput(
                national=aggregate_national([]),
                engine_version=self.version,
                warnings=["No schools supplied."],
            )

        assessments: List[SchoolAssessment] = [self.assess_one(s) for s in schools]
        national = aggregate_national(schools)

        red_count = national.schools_by_status[Status.RED]
        if red_count:
            logger.info(f"🚨 Schools needing urgent attention: {red_count}")

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(f"✨ Assessment complete ({processing_time:.2f}ms)")

        return AssessmentOutput(
            assessments=assessments,
            national=national,
            processing_time_ms=round(processing_time, 2),
            engine_version=self.version,
        )


def assess_schools(schools: Sequence[School]) -> AssessmentOutput:
    """
    Convenience function to assess a snapshot without managing an engine.
    """
    engine = AssessmentEngine()
    return engine.assess(schools)
