import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from assessment.logic.adapter import load_schools
from assessment.logic.contracts import School

load_dotenv()

DEFAULT_DATA_PATH = Path(__file__).resolve().parent / "data" / "schools.json"

SCHOOLS_DATA_PATH = os.getenv("SCHOOLS_DATA_PATH") or str(DEFAULT_DATA_PATH)
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

_snapshot: Optional[List[School]] = None


def get_schools() -> List[School]:
    """Snapshot of schools, loaded once per process."""
    global _snapshot
    if _snapshot is None:
        _snapshot = load_schools(SCHOOLS_DATA_PATH)
    return _snapshot


def reset_snapshot() -> None:
    """Drop the cached snapshot so the next request reloads the file."""
    global _snapshot
    _snapshot = None
