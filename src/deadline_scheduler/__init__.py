"""Deadline Scheduler library initialization."""

from .scheduler import DeadlineScheduler, SchedulerConfig, ScheduleResult, ScheduleStats, schedule
from .structures import Assignment, SlotForest, SlotSet
from .errors import InvariantViolation, OutOfRange, SchedulerError
from .deadlines import default_deadlines, generate_deadlines, validate_deadlines
from .diagnostics import render_forest_table
from .runner import schedule_file

__all__ = [
    "DeadlineScheduler",
    "SchedulerConfig",
    "ScheduleResult",
    "ScheduleStats",
    "schedule",
    "Assignment",
    "SlotForest",
    "SlotSet",
    "InvariantViolation",
    "OutOfRange",
    "SchedulerError",
    "default_deadlines",
    "generate_deadlines",
    "validate_deadlines",
    "render_forest_table",
    "schedule_file",
]
