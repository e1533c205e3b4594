"""Text rendering for schedules and the slot forest."""

from __future__ import annotations

import math
from typing import List, Sequence

from .structures import Assignment


_SLOT_LABEL = "time slot         |"
_RULE_LABEL = "------------------|"
_REPRESENTATIVE_LABEL = "repre. of its set |"


def field_width(size: int) -> int:
    """Return the column width needed to print numbers up to `size`."""

    if size < 1:
        raise ValueError("size must be positive")
    return 1 + int(math.log10(size))


def describe_tasks(deadlines: Sequence[int]) -> List[str]:
    width = field_width(len(deadlines))
    return [
        f"task {task + 1:>{width}} has deadline at time {deadline + 1:>{width}}"
        for task, deadline in enumerate(deadlines)
    ]


def describe_assignment(assignment: Assignment, size: int) -> str:
    width = field_width(size)
    return f"task {assignment.task + 1:>{width}} is scheduled in time slot {assignment.slot + 1:>{width}}"


def render_forest_table(representatives: Sequence[int]) -> str:
    """Return the three-line table of each slot's representative free slot.

    Both rows are 1-based so they line up with the printed schedule.
    """

    size = len(representatives)
    width = field_width(size)
    slots = " ".join(f"{slot + 1:>{width}}" for slot in range(size))
    rule = "-".join("-" * width for _ in range(size))
    values = " ".join(f"{value + 1:>{width}}" for value in representatives)
    return "\n".join(
        [
            _SLOT_LABEL + slots,
            _RULE_LABEL + rule,
            _REPRESENTATIVE_LABEL + values,
        ]
    )
