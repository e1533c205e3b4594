"""Disjoint-set forest over unit time slots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .errors import InvariantViolation, OutOfRange


@dataclass(frozen=True)
class Assignment:
    """A task placed in a time slot. All indices are 0-based."""

    task: int
    deadline: int
    slot: int

    @property
    def late(self) -> bool:
        return self.slot > self.deadline


@dataclass
class SlotSet:
    """Forest node for one time slot.

    ``available_slot`` is only current on a root; other nodes pick up the
    root's value the next time ``find`` passes through them.
    """

    available_slot: int
    parent: int
    rank: int = 0


@dataclass
class SlotForest:
    """Union-find structure whose sets each offer a single free slot.

    Slot ``i`` stands for the interval ``[i, i + 1)``. A set is the run of
    slots that currently resolve to the same free slot, so ``find`` answers
    "latest free slot at or before ``i``" in near-constant amortized time.
    """

    size: int
    sets: List[SlotSet] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("size must be positive")
        self.sets = [SlotSet(available_slot=-1, parent=-1) for _ in range(self.size)]
        for slot in range(self.size):
            self.make(slot)

    def __len__(self) -> int:
        return self.size

    def make(self, slot: int) -> None:
        self._check(slot)
        node = self.sets[slot]
        node.available_slot = slot
        node.parent = slot
        node.rank = 0

    def find(self, slot: int) -> int:
        """Return the root of ``slot``'s set, compressing the path to it."""

        self._check(slot)
        root = slot
        while self.sets[root].parent != root:
            root = self.sets[root].parent

        available = self.sets[root].available_slot
        node = slot
        while node != root:
            following = self.sets[node].parent
            self.sets[node].parent = root
            self.sets[node].available_slot = available
            node = following
        return root

    def union(self, left: int, right: int) -> None:
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return
        self.merge(root_left, root_right)

    def merge(self, root_left: int, root_right: int) -> None:
        """Link two roots by rank; the merged set offers ``root_right``'s slot.

        ``root_left`` is the set whose slot was just handed out, so its own
        ``available_slot`` is stale whichever way the link goes.
        """

        if not (self.is_root(root_left) and self.is_root(root_right)):
            raise InvariantViolation(f"merge expects two roots, got {root_left} and {root_right}")

        left = self.sets[root_left]
        right = self.sets[root_right]
        if left.rank > right.rank:
            right.parent = root_left
            left.available_slot = right.available_slot
        else:
            left.parent = root_right
            if left.rank == right.rank:
                right.rank += 1

    def available_slot(self, slot: int) -> int:
        return self.sets[self.find(slot)].available_slot

    def representatives(self) -> List[int]:
        """Return the free slot each slot currently resolves to."""

        return [self.available_slot(slot) for slot in range(self.size)]

    def is_root(self, slot: int) -> bool:
        self._check(slot)
        return self.sets[slot].parent == slot

    def rank(self, slot: int) -> int:
        self._check(slot)
        return self.sets[slot].rank

    def _check(self, slot: int) -> None:
        if not 0 <= slot < self.size:
            raise OutOfRange(slot, self.size)
