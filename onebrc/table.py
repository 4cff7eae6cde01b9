"""
Running statistics per station.

A table maps the raw station-name bytes to an Aggregate. Keys are the
names themselves, so two different stations can never share an entry.
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict

from onebrc.measurement import Measurement


class Aggregate:
    __slots__ = ("min", "max", "sum", "count")

    def __init__(self, min: Measurement, max: Measurement, sum: int, count: int):
        self.min = min
        self.max = max
        self.sum = sum
        self.count = count

    @classmethod
    def first(cls, value: Measurement) -> "Aggregate":
        return cls(value, value, value, 1)

    def observe(self, value: Measurement):
        if value < self.min:
            self.min = value
        if value > self.max:
            self.max = value
        self.sum += value
        self.count += 1

    def combine(self, other: "Aggregate") -> "Aggregate":
        """Return a new aggregate; neither operand is modified."""
        return Aggregate(
            self.min if self.min < other.min else other.min,
            self.max if self.max > other.max else other.max,
            self.sum + other.sum,
            self.count + other.count,
        )

    def copy(self) -> "Aggregate":
        return Aggregate(self.min, self.max, self.sum, self.count)

    def as_tuple(self):
        return self.min, self.max, self.sum, self.count

    def __eq__(self, other):
        if not isinstance(other, Aggregate):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return f"Aggregate(min={self.min}, max={self.max}, sum={self.sum}, count={self.count})"

    # __slots__ classes need explicit state for pickling across processes
    def __getstate__(self):
        return self.as_tuple()

    def __setstate__(self, state):
        self.min, self.max, self.sum, self.count = state


Table = Dict[bytes, Aggregate]


def observe(table: Table, name: bytes, value: Measurement):
    agg = table.get(name)
    if agg is None:
        table[name] = Aggregate.first(value)
    else:
        agg.observe(value)


@dataclass
class ScanResult:
    """One worker's table plus its bookkeeping, or the reduced final result."""

    table: Table = field(default_factory=dict)
    lines: int = 0
    rejected: Counter = field(default_factory=Counter)

    @property
    def stations(self) -> int:
        return len(self.table)

    @property
    def accepted(self) -> int:
        return sum(agg.count for agg in self.table.values())
