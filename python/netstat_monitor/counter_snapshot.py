"""Immutable per-interface counter sample and its positional column schema."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Positions inside the 16 numeric columns that follow "<label>:".
FIELD_COUNT = 16
RX_BYTES = 0
RX_PACKETS = 1
RX_ERRORS = 2
RX_DROPPED = 3
TX_BYTES = 8
TX_PACKETS = 9
TX_ERRORS = 10
TX_DROPPED = 11


@dataclass(frozen=True)
class CounterSnapshot:
    """Cumulative traffic counters of one interface at one monotonic instant."""

    interface: str
    rx_bytes: int = 0
    rx_packets: int = 0
    rx_errors: int = 0
    rx_dropped: int = 0
    tx_bytes: int = 0
    tx_packets: int = 0
    tx_errors: int = 0
    tx_dropped: int = 0
    captured_at: float = 0.0
    valid: bool = True

    @classmethod
    def empty(cls, interface: str) -> "CounterSnapshot":
        """Placeholder standing in for "no previous sample yet"."""
        return cls(interface=interface, valid=False)

    @classmethod
    def from_values(
        cls,
        interface: str,
        values: Tuple[int, ...],
        captured_at: float,
    ) -> "CounterSnapshot":
        if len(values) != FIELD_COUNT:
            raise ValueError(f"Expected {FIELD_COUNT} counter values, got {len(values)}")
        return cls(
            interface=interface,
            rx_bytes=values[RX_BYTES],
            rx_packets=values[RX_PACKETS],
            rx_errors=values[RX_ERRORS],
            rx_dropped=values[RX_DROPPED],
            tx_bytes=values[TX_BYTES],
            tx_packets=values[TX_PACKETS],
            tx_errors=values[TX_ERRORS],
            tx_dropped=values[TX_DROPPED],
            captured_at=captured_at,
        )

    def counters(self) -> Tuple[int, int, int, int, int, int, int, int]:
        return (
            self.rx_bytes,
            self.rx_packets,
            self.rx_errors,
            self.rx_dropped,
            self.tx_bytes,
            self.tx_packets,
            self.tx_errors,
            self.tx_dropped,
        )


__all__ = [
    "CounterSnapshot",
    "FIELD_COUNT",
    "RX_BYTES",
    "RX_PACKETS",
    "RX_ERRORS",
    "RX_DROPPED",
    "TX_BYTES",
    "TX_PACKETS",
    "TX_ERRORS",
    "TX_DROPPED",
]
