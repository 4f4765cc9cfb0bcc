"""
Assessment API Routes

Exposes the status engine via REST API.
"""

import logging
from typing import List, Dict, Any
from fastapi import APIRouter, Depends, HTTPException, Body
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from data_source import get_schools
from utils.formatting import status_label
from .logic.contracts import School, SchoolAssessment
from .logic.adapter import parse_school
from .logic.engine import AssessmentEngine
from .logic.national import aggregate_national, group_urgent_risks
from .logic.constants import ENGINE_VERSION

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assessment", tags=["assessment"])

engine = AssessmentEngine()


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/national", summary="National aggregates")
def get_national(schools: List[School] = Depends(get_schools)):
    """Count of schools by overall status, with totals."""
    return aggregate_national(schools).model_dump(mode="json")


@router.get("/schools", summary="List schools with their status")
def list_schools(schools: List[School] = Depends(get_schools)):
    """
    One summary row per school, in snapshot order.
    """
    output = engine.assess(schools)
    return {
        "schools": [_serialize_summary(a) for a in output.assessments],
        "count": len(output.assessments),
        "processing_time_ms": output.processing_time_ms,
        "warnings": output.warnings,
    }


@router.get("/schools/{school_id}", summary="Full assessment for one school")
def get_school(school_id: str, schools: List[School] = Depends(get_schools)):
    for school in schools:
        if school.id == school_id:
            return engine.assess_one(school).model_dump(mode="json")
    raise HTTPException(status_code=404, detail=f"School not found: {school_id}")


@router.get("/risks", summary="Schools with urgent risks, by category")
def get_urgent_risks(schools: List[School] = Depends(get_schools)):
    grouped = group_urgent_risks(schools)
    return {
        "categories": {category.value: ids for category, ids in grouped.items()},
        "count": len({school_id for ids in grouped.values() for school_id in ids}),
    }


@router.post("/classify", summary="Classify a single school record")
def classify_record(record: Dict[str, Any] = Body(...)):
    """
    Classify a school record supplied in the request body
    (camelCase or snake_case keys).
    """
    try:
        try:
            school = parse_school(record)
        except ValidationError as e:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid school record: {e.errors(include_url=False)}"
            )
        return engine.assess_one(school).model_dump(mode="json")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Classification failed: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


def _serialize_summary(assessment: SchoolAssessment) -> Dict[str, Any]:
    """Convert a SchoolAssessment to a compact JSON-serializable row."""
    return {
        "school_id": assessment.school_id,
        "school_name": assessment.school_name,
        "state": assessment.state,
        "status": assessment.status.value,
        "status_label": status_label(assessment.status),
        "total_students": assessment.total_students,
        "total_boarding_capacity": assessment.total_boarding_capacity,
        "risk_flag_count": len([f for f in assessment.risk_flags if f.active]),
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Assessment engine health check")
def health_check():
    """Check if the assessment engine is operational."""
    return {"status": "ok", "engine": "assessment", "version": ENGINE_VERSION}
