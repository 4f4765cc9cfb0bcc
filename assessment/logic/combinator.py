"""
Worst-Status Combinator

Collapses any number of statuses into one: Red beats Amber beats Green.
"""

from typing import Iterable
from .constants import Status, STATUS_SEVERITY


def combine_worst(statuses: Iterable[Status]) -> Status:
    """
    Return the most severe status in the sequence.

    An empty sequence yields Green.
    """
    worst = Status.GREEN
    for status in statuses:
        if status == Status.RED:
            return Status.RED
        if STATUS_SEVERITY[status] > STATUS_SEVERITY[worst]:
            worst = status
    return worst
