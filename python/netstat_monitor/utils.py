"""Shared constants and human-readable formatting helpers."""

from __future__ import annotations

PROC_NET_DEV = "/proc/net/dev"
DEFAULT_INTERVAL = 2
HEADER_INTERVAL = 20
HEADER_LINES = 2

WRAP_32 = 0x1_0000_0000
UINT64_MAX = 0xFFFF_FFFF_FFFF_FFFF

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_BYTE_UNITS = ("B", "KB", "MB", "GB", "TB")
_RATE_UNITS = ("B/s", "KB/s", "MB/s", "GB/s")


def format_bytes(value: int) -> str:
    """Render a byte count with binary (1024) units."""
    scaled = float(value)
    unit = 0
    while scaled >= 1024.0 and unit < len(_BYTE_UNITS) - 1:
        scaled /= 1024.0
        unit += 1
    if unit == 0:
        return f"{value} {_BYTE_UNITS[0]}"
    return f"{scaled:.1f} {_BYTE_UNITS[unit]}"


def format_rate(rate: float) -> str:
    """Render a bytes-per-second rate; anything below one byte shows as zero."""
    if rate < 1.0:
        return "0 B/s"
    scaled = rate
    unit = 0
    while scaled >= 1024.0 and unit < len(_RATE_UNITS) - 1:
        scaled /= 1024.0
        unit += 1
    if unit == 0:
        return f"{scaled:.0f} {_RATE_UNITS[0]}"
    return f"{scaled:.1f} {_RATE_UNITS[unit]}"


__all__ = [
    "PROC_NET_DEV",
    "DEFAULT_INTERVAL",
    "HEADER_INTERVAL",
    "HEADER_LINES",
    "WRAP_32",
    "UINT64_MAX",
    "TIMESTAMP_FORMAT",
    "format_bytes",
    "format_rate",
]
