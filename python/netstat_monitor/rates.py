"""Counter deltas and per-second rates between two successive snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .counter_snapshot import CounterSnapshot
from .utils import UINT64_MAX, WRAP_32


def safe_delta(current: int, previous: int) -> int:
    """Difference between two counter readings.

    A decrease is taken as exactly one 32-bit wraparound. The result is
    reduced to 64 bits so a previous value above 2**32 behaves as unsigned
    64-bit arithmetic would.
    """
    if current >= previous:
        return current - previous
    return ((WRAP_32 - previous) + current) & UINT64_MAX


def calculate_rate(delta: int, elapsed_seconds: float) -> float:
    if elapsed_seconds <= 0.0:
        return 0.0
    return delta / elapsed_seconds


@dataclass(frozen=True)
class InterfaceRates:
    elapsed: float
    rx_bytes_delta: int
    rx_packets_delta: int
    tx_bytes_delta: int
    tx_packets_delta: int
    rx_bytes_rate: float
    rx_packets_rate: float
    tx_bytes_rate: float
    tx_packets_rate: float


def compute_rates(
    previous: Optional[CounterSnapshot],
    current: CounterSnapshot,
) -> Optional[InterfaceRates]:
    """Rates of *current* relative to *previous*; ``None`` means unavailable."""
    if previous is None or not previous.valid:
        return None

    elapsed = current.captured_at - previous.captured_at
    rx_bytes = safe_delta(current.rx_bytes, previous.rx_bytes)
    rx_packets = safe_delta(current.rx_packets, previous.rx_packets)
    tx_bytes = safe_delta(current.tx_bytes, previous.tx_bytes)
    tx_packets = safe_delta(current.tx_packets, previous.tx_packets)

    return InterfaceRates(
        elapsed=elapsed,
        rx_bytes_delta=rx_bytes,
        rx_packets_delta=rx_packets,
        tx_bytes_delta=tx_bytes,
        tx_packets_delta=tx_packets,
        rx_bytes_rate=calculate_rate(rx_bytes, elapsed),
        rx_packets_rate=calculate_rate(rx_packets, elapsed),
        tx_bytes_rate=calculate_rate(tx_bytes, elapsed),
        tx_packets_rate=calculate_rate(tx_packets, elapsed),
    )


__all__ = ["safe_delta", "calculate_rate", "InterfaceRates", "compute_rates"]
