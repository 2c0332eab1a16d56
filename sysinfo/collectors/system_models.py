"""System data models for system collector."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Union


@dataclass(frozen=True)
class CpuSample:
    """CPU utilization measured over a sampling window."""
    percentages: List[float]  # one entry, or one per logical core
    window: float
    per_core: bool
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def overall(self) -> float:
        """Mean utilization across the reported values."""
        if not self.percentages:
            return 0.0
        return sum(self.percentages) / len(self.percentages)


@dataclass(frozen=True)
class MemorySample:
    """Virtual memory statistics in bytes."""
    total: int
    used: int
    free: int
    percent: float
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class DiskSample:
    """Usage of one mounted partition in bytes."""
    mountpoint: str
    total: int
    used: int
    free: int
    percent: float
    timestamp: datetime = field(default_factory=datetime.now)


MetricSample = Union[CpuSample, MemorySample, DiskSample]
