"""Deadline sequences fed to the scheduler."""

from __future__ import annotations

import numbers
import re
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .errors import OutOfRange


DEFAULT_DEADLINES: tuple[int, ...] = (0, 6, 1, 9, 2, 5, 3, 3, 6, 0)
_LEADING_COUNT_PATTERN = re.compile(r"\s*\+?(\d+)")


def default_deadlines() -> List[int]:
    """Return a fresh copy of the ten-task example sequence."""

    return list(DEFAULT_DEADLINES)


def generate_deadlines(size: int, seed: int | None = None) -> List[int]:
    """Draw `size` deadlines uniformly from ``[0, size)``."""

    if size < 1:
        raise ValueError("size must be positive")
    rng = np.random.default_rng(seed)
    return [int(value) for value in rng.integers(0, size, size=size)]


def validate_deadlines(deadlines: Iterable[object], size: int | None = None) -> List[int]:
    """Return `deadlines` as plain ints, rejecting any outside ``[0, size)``.

    `size` defaults to the number of deadlines, one slot per task.
    """

    values = list(deadlines)
    if not values:
        raise ValueError("at least one deadline is required")
    size = len(values) if size is None else size

    checked: List[int] = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise OutOfRange(value, size, what="deadline")
        if not 0 <= value < size:
            raise OutOfRange(value, size, what="deadline")
        checked.append(int(value))
    return checked


def parse_task_count(text: Optional[str]) -> int | None:
    """Return the task count that `text` starts with, or None when there is none.

    Like ``scanf("%u")``, leading digits are read and anything after them is
    ignored, so ``"12abc"`` gives 12. Zero and signed negatives give None.
    """

    match = _LEADING_COUNT_PATTERN.match(str(text or ""))
    if not match:
        return None
    count = int(match.group(1))
    return count if count > 0 else None


def from_one_based(values: Sequence[object]) -> List[object]:
    """Shift 1-based deadlines, as written in files, to slot indices."""

    shifted: List[object] = []
    for value in values:
        if isinstance(value, numbers.Integral) and not isinstance(value, bool):
            shifted.append(int(value) - 1)
        else:
            shifted.append(value)
    return shifted
