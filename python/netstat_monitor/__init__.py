"""Per-interval traffic counters and rates for a single network interface."""

from .counter_snapshot import CounterSnapshot
from .counter_source import CounterSource, CounterSourceError, ReadResult, ReadStatus
from .line_parser import MalformedRowError, parse_interface_line, split_label
from .rates import InterfaceRates, calculate_rate, compute_rates, safe_delta
from .summary_statistics import RateSummary, SummaryStatistics
from .monitor import (
    InterfaceMonitor,
    MonitorOptions,
    MonitorStartupError,
    MonitorState,
    MonitorSummary,
)
from .console import ConsoleRenderer
from .interfaces import InterfaceInfo, describe_interfaces

__all__ = [
    "CounterSnapshot",
    "CounterSource",
    "CounterSourceError",
    "ReadResult",
    "ReadStatus",
    "MalformedRowError",
    "parse_interface_line",
    "split_label",
    "InterfaceRates",
    "calculate_rate",
    "compute_rates",
    "safe_delta",
    "RateSummary",
    "SummaryStatistics",
    "InterfaceMonitor",
    "MonitorOptions",
    "MonitorStartupError",
    "MonitorState",
    "MonitorSummary",
    "ConsoleRenderer",
    "InterfaceInfo",
    "describe_interfaces",
]
