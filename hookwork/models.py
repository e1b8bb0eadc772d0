"""Core data structures for hook registration."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

HookName = str
HookCallback = Callable[..., Any]


class ArityPolicy(str, Enum):
    REJECT = "reject"
    TRUNCATE = "truncate"


@dataclass(frozen=True)
class CallbackRecord:
    callback: HookCallback
    accepted_args: int | None = None

    def select_args(self, call_args: tuple[Any, ...], policy: ArityPolicy) -> tuple[Any, ...]:
        if policy is ArityPolicy.TRUNCATE and self.accepted_args is not None:
            return call_args[: self.accepted_args]
        return call_args


@dataclass
class HookEntry:
    """Callbacks for one hook name, bucketed by priority.

    ``sorted`` is a cache flag: when true the bucket keys iterate in ascending
    order. Any mutation clears it and the next dispatch reorders the buckets.
    """

    buckets: dict[int, list[CallbackRecord]] = field(default_factory=dict)
    sorted: bool = True

    def add(self, record: CallbackRecord, priority: int) -> None:
        self.buckets.setdefault(priority, []).append(record)
        self.sorted = False

    def ensure_sorted(self) -> bool:
        if self.sorted:
            return False
        self._reorder()
        self.sorted = True
        return True

    def _reorder(self) -> None:
        self.buckets = dict(sorted(self.buckets.items()))

    def records(self) -> Iterator[CallbackRecord]:
        for bucket in self.buckets.values():
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets.values())

    @property
    def min_priority(self) -> int | None:
        return min(self.buckets) if self.buckets else None

    @property
    def max_priority(self) -> int | None:
        return max(self.buckets) if self.buckets else None
