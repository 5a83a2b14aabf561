"""Cost counters aggregated for allocation sites."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class AllocationData:
    """Allocation cost: counts of calls, temporaries, leaked and peak bytes."""

    allocations: int = 0
    temporary: int = 0
    leaked: int = 0
    peak: int = 0

    def clear_cost(self) -> None:
        """Reset every counter to zero."""
        for field in fields(self):
            setattr(self, field.name, 0)

    def __iadd__(self, other: AllocationData) -> AllocationData:
        if not isinstance(other, AllocationData):
            return NotImplemented
        self.allocations += other.allocations
        self.temporary += other.temporary
        self.peak += other.peak
        self.leaked += other.leaked
        return self

    def __isub__(self, other: AllocationData) -> AllocationData:
        if not isinstance(other, AllocationData):
            return NotImplemented
        self.allocations -= other.allocations
        self.temporary -= other.temporary
        self.peak -= other.peak
        self.leaked -= other.leaked
        return self

    def __add__(self, other: AllocationData) -> AllocationData:
        if not isinstance(other, AllocationData):
            return NotImplemented
        return AllocationData(
            allocations=self.allocations + other.allocations,
            temporary=self.temporary + other.temporary,
            leaked=self.leaked + other.leaked,
            peak=self.peak + other.peak,
        )

    def __sub__(self, other: AllocationData) -> AllocationData:
        if not isinstance(other, AllocationData):
            return NotImplemented
        return AllocationData(
            allocations=self.allocations - other.allocations,
            temporary=self.temporary - other.temporary,
            leaked=self.leaked - other.leaked,
            peak=self.peak - other.peak,
        )