"""Exceptions raised by the deadline scheduler."""

from __future__ import annotations


class SchedulerError(Exception):
    """Base class for scheduler failures."""


class OutOfRange(SchedulerError, ValueError):
    """A slot or deadline index falls outside ``[0, size)``."""

    def __init__(self, value: object, size: int, what: str = "slot") -> None:
        self.value = value
        self.size = size
        self.what = what
        super().__init__(f"{what} {value!r} is out of range for {size} slot(s)")


class InvariantViolation(SchedulerError, RuntimeError):
    """The slot forest reached a state that correct use never produces."""
