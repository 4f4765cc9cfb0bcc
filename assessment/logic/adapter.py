"""
Snapshot Adapter

Loads institution records from a JSON snapshot and normalizes them into
School contracts for the engine.

This is a pure loading layer - NO classification, NO business logic.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .contracts import School

logger = logging.getLogger(__name__)


def parse_school(record: Dict[str, Any]) -> School:
    """
    Convert one raw school record (camelCase or snake_case keys) into a
    School contract.

    Raises:
        pydantic.ValidationError: if the record does not match the contract
    """
    return School.model_validate(record)


def parse_schools(document: Union[List[Dict[str, Any]], Dict[str, Any]]) -> List[School]:
    """
    Parse a snapshot document: either a list of school records or an
    object with a "schools" key.
    """
    if isinstance(document, dict):
        records = document.get("schools", [])
    else:
        records = document
    return [parse_school(record) for record in records]


def load_schools(path: Union[str, Path]) -> List[School]:
    """
    Read and parse a JSON snapshot file.

    Args:
        path: Location of the snapshot

    Returns:
        List of School contracts in file order
    """
    path = Path(path)
    logger.info(f"📂 Loading school snapshot from {path}")

    with path.open("r", encoding="utf-8") as fh:
        document = json.load(fh)

    schools = parse_schools(document)
    if not schools:
        logger.warning(f"⚠️ Snapshot {path} contains no schools")
    else:
        logger.info(f"📦 Schools loaded: {len(schools)}")
    return schools
