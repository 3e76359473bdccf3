"""Column printer for the terminal session."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Callable, Optional, TextIO

from .counter_snapshot import CounterSnapshot
from .counter_source import ReadResult
from .monitor import MonitorOptions, MonitorSummary
from .rates import InterfaceRates
from .utils import TIMESTAMP_FORMAT, format_bytes, format_rate

_ROW_FORMAT = (
    "{:<19} {:<10} {:>15} {:>12} {:>10} {:>10} {:>8} {:>8} "
    "{:>15} {:>12} {:>10} {:>10} {:>8} {:>8}"
)
_COLUMNS = (
    "Timestamp", "Interface",
    "RxBytes", "ΔRx", "RxPkts", "ΔRx(p/s)", "RxErr", "RxDrop",
    "TxBytes", "ΔTx", "TxPkts", "ΔTx(p/s)", "TxErr", "TxDrop",
)
_UNDERLINE = (19, 10, 15, 12, 10, 10, 8, 8, 15, 12, 10, 10, 8, 8)
UNAVAILABLE = "-"


def format_timestamp(moment: Optional[datetime] = None) -> str:
    return (moment or datetime.now()).strftime(TIMESTAMP_FORMAT)


class ConsoleRenderer:
    """Writes the table to *stream* and failures to *err_stream*."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
        *,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.err_stream = err_stream if err_stream is not None else sys.stderr
        self._now = now

    # ------------------------------------------------------------------
    def on_start(self, options: MonitorOptions) -> None:
        banner = f"Monitoring interface: {options.interface} (interval: {options.interval} seconds"
        if options.max_iterations is not None:
            banner += f", iterations: {options.max_iterations}"
        self._write(banner + ")")
        self._write("Press Ctrl+C to stop")

    def on_header(self) -> None:
        self._write("")
        self._write(_ROW_FORMAT.format(*_COLUMNS))
        self._write(_ROW_FORMAT.format(*("-" * width for width in _UNDERLINE)))

    def on_sample(self, snapshot: CounterSnapshot, rates: Optional[InterfaceRates]) -> None:
        rx_rate = tx_rate = rx_pkt_rate = tx_pkt_rate = UNAVAILABLE
        if rates is not None:
            rx_rate = format_rate(rates.rx_bytes_rate)
            tx_rate = format_rate(rates.tx_bytes_rate)
            rx_pkt_rate = f"{rates.rx_packets_rate:.0f}"
            tx_pkt_rate = f"{rates.tx_packets_rate:.0f}"

        self._write(
            _ROW_FORMAT.format(
                format_timestamp(self._now()),
                snapshot.interface,
                format_bytes(snapshot.rx_bytes),
                rx_rate,
                snapshot.rx_packets,
                rx_pkt_rate,
                snapshot.rx_errors,
                snapshot.rx_dropped,
                format_bytes(snapshot.tx_bytes),
                tx_rate,
                snapshot.tx_packets,
                tx_pkt_rate,
                snapshot.tx_errors,
                snapshot.tx_dropped,
            )
        )

    def on_read_failure(self, result: ReadResult) -> None:
        print(
            f"\nWarning: Failed to read stats for {result.interface} ({result.describe()})",
            file=self.err_stream,
            flush=True,
        )

    def on_stop(self, summary: MonitorSummary) -> None:
        self._write("")
        if summary.stopped_by_signal:
            self._write("Monitoring stopped by signal")
        self._write(f"Total iterations: {summary.iterations}")
        if summary.failures:
            self._write(f"Failed reads: {summary.failures}")
        if summary.rx_rate.count:
            self._write(
                f"Rx: {format_bytes(summary.rx_bytes_total)} total, "
                f"avg {format_rate(summary.rx_rate.mean)}, peak {format_rate(summary.rx_rate.peak)}"
            )
            self._write(
                f"Tx: {format_bytes(summary.tx_bytes_total)} total, "
                f"avg {format_rate(summary.tx_rate.mean)}, peak {format_rate(summary.tx_rate.peak)}"
            )

    # ------------------------------------------------------------------
    def _write(self, text: str) -> None:
        print(text, file=self.stream, flush=True)


__all__ = ["ConsoleRenderer", "format_timestamp", "UNAVAILABLE"]
