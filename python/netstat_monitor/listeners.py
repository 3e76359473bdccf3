"""Listener interface the poll loop drives once per tick."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

from .counter_snapshot import CounterSnapshot
from .counter_source import ReadResult
from .rates import InterfaceRates

if TYPE_CHECKING:  # pragma: no cover
    from .monitor import MonitorOptions, MonitorSummary


class MonitorListener(Protocol):
    def on_start(self, options: "MonitorOptions") -> None:  # pragma: no cover - protocol definition
        ...

    def on_header(self) -> None:  # pragma: no cover - protocol definition
        ...

    def on_sample(
        self,
        snapshot: CounterSnapshot,
        rates: Optional[InterfaceRates],
    ) -> None:  # pragma: no cover - protocol definition
        ...

    def on_read_failure(self, result: ReadResult) -> None:  # pragma: no cover - protocol definition
        ...

    def on_stop(self, summary: "MonitorSummary") -> None:  # pragma: no cover - protocol definition
        ...


__all__ = ["MonitorListener"]
