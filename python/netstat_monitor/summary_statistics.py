"""Incremental rate aggregates for the end-of-session summary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RateSummary:
    count: int
    mean: float
    peak: float


class SummaryStatistics:
    """Running count/sum/max; keeps no per-sample history."""

    __slots__ = ("_count", "_sum", "_max")

    def __init__(self) -> None:
        self._count: int = 0
        self._sum: float = 0.0
        self._max: Optional[float] = None

    def add_value(self, value: float) -> None:
        self._count += 1
        self._sum += value
        self._max = value if self._max is None else max(self._max, value)

    @property
    def count(self) -> int:
        return self._count

    @property
    def mean(self) -> float:
        if self._count == 0:
            return 0.0
        return self._sum / self._count

    @property
    def peak(self) -> float:
        return 0.0 if self._max is None else self._max

    def summary(self) -> RateSummary:
        return RateSummary(count=self._count, mean=self.mean, peak=self.peak)


__all__ = ["RateSummary", "SummaryStatistics"]
