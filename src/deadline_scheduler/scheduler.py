"""Greedy deadline scheduling driven by the slot forest."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Sequence

import pandas as pd
from tqdm import tqdm

from .diagnostics import describe_assignment, describe_tasks, render_forest_table
from .errors import InvariantViolation
from .deadlines import validate_deadlines
from .structures import Assignment, SlotForest


StepHook = Callable[[Assignment, SlotForest], None]


@dataclass
class ScheduleStats:
    """Summary metrics for one scheduling run."""

    total_tasks: int
    late_tasks: int
    on_time_tasks: int
    unions: int
    runtime_seconds: float


@dataclass
class ScheduleResult:
    """Result bundle returned by :class:DeadlineScheduler."""

    assignments: List[Assignment]
    dataframe: pd.DataFrame
    stats: ScheduleStats
    snapshots: List[List[int]] = field(default_factory=list)

    @property
    def slots(self) -> List[int]:
        return [assignment.slot for assignment in self.assignments]


@dataclass
class SchedulerConfig:
    """Configuration parameters for :class:DeadlineScheduler."""

    verbose: bool = False
    use_tqdm: bool = False
    show_table: bool = False
    record_snapshots: bool = False


class DeadlineScheduler:
    """Assign unit-time tasks to slots, minimizing the number of late tasks.

    Tasks are taken in the order given, which must already be descending
    penalty. Each one gets the latest free slot at or before its deadline;
    when none is left it wraps to the latest free slot overall and is late.
    """

    def __init__(self, config: SchedulerConfig | None = None) -> None:
        self.config = config or SchedulerConfig()

    def schedule(self, deadlines: Iterable[object], on_step: StepHook | None = None) -> ScheduleResult:
        """Schedule every task and return the assignments in input order."""

        verbose = self.config.verbose
        start_time = time.time()
        checked = validate_deadlines(deadlines)
        size = len(checked)

        if verbose:
            print("Description of task(s)\n----------------------")
            for line in describe_tasks(checked):
                print(line)
            print("\nScheduling of task(s)\n---------------------")

        forest = SlotForest(size)
        last = size - 1
        assigned = [False] * size
        assignments: List[Assignment] = []
        snapshots: List[List[int]] = []
        unions = 0

        iterator: Iterable[int] = range(size)
        if self._use_tqdm:
            iterator = tqdm(iterator, total=size, desc="Scheduling", unit="task")

        for task in iterator:
            deadline = checked[task]
            slot = forest.available_slot(deadline)
            if assigned[slot]:
                raise InvariantViolation(f"slot {slot} resolved for task {task} is already assigned")
            assigned[slot] = True

            assignment = Assignment(task=task, deadline=deadline, slot=slot)
            assignments.append(assignment)
            if verbose:
                print(describe_assignment(assignment, size))

            if task != last:
                forest.union(slot, last if slot == 0 else slot - 1)
                unions += 1

            if on_step is not None:
                on_step(assignment, forest)
            if self.config.record_snapshots or self.config.show_table:
                representatives = forest.representatives()
                if self.config.record_snapshots:
                    snapshots.append(representatives)
                if self.config.show_table:
                    print(render_forest_table(representatives))

        late = sum(1 for assignment in assignments if assignment.late)
        stats = ScheduleStats(
            total_tasks=size,
            late_tasks=late,
            on_time_tasks=size - late,
            unions=unions,
            runtime_seconds=time.time() - start_time,
        )

        if verbose:
            print(f"\n   - Tasks scheduled: {size}")
            print(f"   - Late tasks: {late}")
            print(f"--- Scheduling finished in {stats.runtime_seconds:.4f} seconds ---")

        return ScheduleResult(
            assignments=assignments,
            dataframe=self._build_dataframe(assignments),
            stats=stats,
            snapshots=snapshots,
        )

    @property
    def _use_tqdm(self) -> bool:
        # Progress bars would interleave with the per-step prints.
        return self.config.use_tqdm and not (self.config.verbose or self.config.show_table)

    @staticmethod
    def _build_dataframe(assignments: Sequence[Assignment]) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "task": [a.task + 1 for a in assignments],
                "deadline": [a.deadline + 1 for a in assignments],
                "time_slot": [a.slot + 1 for a in assignments],
                "late": [a.late for a in assignments],
            },
            columns=["task", "deadline", "time_slot", "late"],
        )


def schedule(deadlines: Iterable[object]) -> List[int]:
    """Return the 0-based slot assigned to each task, in input order."""

    return DeadlineScheduler().schedule(deadlines).slots


__all__ = [
    "DeadlineScheduler",
    "SchedulerConfig",
    "ScheduleResult",
    "ScheduleStats",
    "schedule",
]
