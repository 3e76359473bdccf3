"""Poll loop sampling one interface until cancelled or a tick bound is hit."""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .counter_snapshot import CounterSnapshot
from .counter_source import CounterSource, CounterSourceError, ReadResult, ReadStatus
from .listeners import MonitorListener
from .rates import InterfaceRates, compute_rates
from .summary_statistics import RateSummary, SummaryStatistics
from .utils import DEFAULT_INTERVAL, HEADER_INTERVAL, PROC_NET_DEV

logger = logging.getLogger(__name__)

# Longest stretch the sleep runs without looking at the stop flag.
STOP_POLL_SECONDS = 0.2


class MonitorStartupError(RuntimeError):
    """Raised when the initial sample cannot be taken."""

    def __init__(
        self,
        message: str,
        *,
        status: ReadStatus,
        available_interfaces: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.available_interfaces = list(available_interfaces or [])


class MonitorState(enum.Enum):
    STARTING = "starting"
    SAMPLING = "sampling"
    SLEEPING = "sleeping"
    STOPPED = "stopped"


@dataclass
class MonitorOptions:
    interface: str
    interval: int = DEFAULT_INTERVAL
    max_iterations: Optional[int] = None
    header_interval: int = HEADER_INTERVAL
    source_path: str = PROC_NET_DEV

    def __post_init__(self) -> None:
        if not self.interface:
            raise ValueError("interface name must not be empty")
        if self.interval <= 0:
            raise ValueError(f"interval must be a positive number of seconds: {self.interval}")
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise ValueError(f"iteration count must be positive: {self.max_iterations}")
        if self.header_interval <= 0:
            raise ValueError(f"header interval must be positive: {self.header_interval}")


@dataclass
class MonitorSummary:
    interface: str
    iterations: int = 0
    samples: int = 0
    failures: int = 0
    stopped_by_signal: bool = False
    rx_bytes_total: int = 0
    tx_bytes_total: int = 0
    rx_rate: RateSummary = field(default_factory=lambda: RateSummary(0, 0.0, 0.0))
    tx_rate: RateSummary = field(default_factory=lambda: RateSummary(0, 0.0, 0.0))


class InterfaceMonitor:
    """Drives read -> compute -> render -> sleep for a single interface."""

    def __init__(
        self,
        options: MonitorOptions,
        listener: MonitorListener,
        *,
        source: Optional[CounterSource] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.options = options
        self.listener = listener
        self.source = source if source is not None else CounterSource(options.source_path)
        self.state = MonitorState.STARTING

        self._sleep = sleep
        self._stop_flag = False
        self._previous = CounterSnapshot.empty(options.interface)
        self._rx_stats = SummaryStatistics()
        self._tx_stats = SummaryStatistics()
        self._summary = MonitorSummary(interface=options.interface)
        self._rows_since_header = 0

    # ------------------------------------------------------------------
    def stop(self) -> None:
        """Request cancellation; safe from signal handlers and other threads.

        Only a flag is stored; no lock is taken.
        """
        self._stop_flag = True

    @property
    def stop_requested(self) -> bool:
        return self._stop_flag

    # ------------------------------------------------------------------
    def run(self) -> MonitorSummary:
        self._start()

        while not self._should_stop():
            self._set_state(MonitorState.SAMPLING)
            self._tick()
            if self._should_stop():
                break

            self._set_state(MonitorState.SLEEPING)
            if self._wait(self.options.interval):
                break

        return self._finish()

    # ------------------------------------------------------------------
    def _start(self) -> None:
        interface = self.options.interface
        result = self.source.read(interface)

        if result.status is ReadStatus.NOT_FOUND:
            try:
                available = self.source.list_interfaces()
            except CounterSourceError:
                logger.debug("Interface enumeration failed", exc_info=True)
                available = []
            raise MonitorStartupError(
                f"Interface '{interface}' not found in {self.source.path}",
                status=result.status,
                available_interfaces=available,
            )
        if not result.ok:
            raise MonitorStartupError(result.describe(), status=result.status)

        logger.info("Monitoring %s from %s", interface, self.source.path)
        self.listener.on_start(self.options)
        self.listener.on_header()

    def _tick(self) -> None:
        self._summary.iterations += 1
        result = self.source.read(self.options.interface)

        if not result.ok or result.snapshot is None:
            self._handle_failure(result)
            return

        current = result.snapshot
        rates = compute_rates(self._previous, current)
        self.listener.on_sample(current, rates)
        self._summary.samples += 1
        if rates is not None:
            self._record(rates)

        self._previous = current

        self._rows_since_header += 1
        if self._rows_since_header >= self.options.header_interval:
            self.listener.on_header()
            self._rows_since_header = 0

    def _handle_failure(self, result: ReadResult) -> None:
        # Previous snapshot is kept so the next good read still has a baseline.
        self._summary.failures += 1
        logger.debug(
            "Failed to read stats for %s: %s",
            self.options.interface,
            result.describe(),
        )
        self.listener.on_read_failure(result)

    def _record(self, rates: InterfaceRates) -> None:
        self._summary.rx_bytes_total += rates.rx_bytes_delta
        self._summary.tx_bytes_total += rates.tx_bytes_delta
        self._rx_stats.add_value(rates.rx_bytes_rate)
        self._tx_stats.add_value(rates.tx_bytes_rate)

    def _wait(self, seconds: float) -> bool:
        """Sleep up to *seconds* in short slices; True once a stop is requested."""
        remaining = float(seconds)
        while remaining > 0 and not self._stop_flag:
            step = min(STOP_POLL_SECONDS, remaining)
            self._sleep(step)
            remaining -= step
        return self._stop_flag

    def _should_stop(self) -> bool:
        if self.stop_requested:
            return True
        limit = self.options.max_iterations
        return limit is not None and self._summary.iterations >= limit

    def _finish(self) -> MonitorSummary:
        self._set_state(MonitorState.STOPPED)
        summary = self._summary
        summary.stopped_by_signal = self.stop_requested
        summary.rx_rate = self._rx_stats.summary()
        summary.tx_rate = self._tx_stats.summary()

        logger.info(
            "Stopped monitoring %s after %d iterations (signal=%s)",
            summary.interface,
            summary.iterations,
            summary.stopped_by_signal,
        )
        self.listener.on_stop(summary)
        return summary

    def _set_state(self, state: MonitorState) -> None:
        if state is not self.state:
            logger.debug("Monitor state %s -> %s", self.state.value, state.value)
        self.state = state


__all__ = [
    "InterfaceMonitor",
    "MonitorOptions",
    "MonitorState",
    "MonitorStartupError",
    "MonitorSummary",
]
